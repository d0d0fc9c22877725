"""
The most-fundamental classes: things that came from somewhere in a script.
Every phrase remembers the slice of script text it came from,
so that whatever prints error messages can point at the culprit.

Operand tokens live here too. A token is either a literal number
or a name to be looked up when the script runs. The accumulator
never holds a token; it holds a float or None.
"""
from typing import Union

class Phrase:
	slice: slice
	def __init__(self, where:slice):
		assert isinstance(where, slice), type(where)
		self.slice = where
	def _key(self): raise NotImplementedError(type(self))
	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()
	def __hash__(self): return hash((type(self), self._key()))

class Literal(Phrase):
	""" A number, spelled out right there in the script. """
	def __init__(self, value:float, where:slice):
		super().__init__(where)
		self.value = float(value)
	def _key(self): return self.value
	def __repr__(self): return "<Literal %r>" % self.value

class Name(Phrase):
	""" Representing the occurrence of a variable name as an operand. """
	def __init__(self, text:str, where:slice):
		assert isinstance(text, str)
		super().__init__(where)
		self.text = text
	def _key(self): return self.text
	def __repr__(self): return "<Name %r>" % self.text

Token = Union[Literal, Name]

NOWHERE = slice(0, 0)
