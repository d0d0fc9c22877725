"""
The set of commands a script can contain, one per line.
The front-end builds these; the evaluator consumes them.
Commands do not change once built.
"""
from typing import Sequence
from .ontology import Phrase, Token, Name, Literal

class Command(Phrase):
	pass

class SetVar(Command):
	""" Capture the accumulator into a named slot, then empty the accumulator. """
	def __init__(self, nom:Name, where:slice):
		assert isinstance(nom, Name), type(nom)
		super().__init__(where)
		self.nom = nom
	def _key(self): return self.nom.text
	def __repr__(self): return "<SetVar %s>" % self.nom.text

class Arithmetic(Command):
	"""
	Fold the accumulator and the operands together, left to right.
	Subclasses name the operation; the primitive module supplies the arithmetic.
	"""
	glyph: str
	operands: tuple[Token, ...]
	def __init__(self, operands:Sequence[Token], where:slice):
		for o in operands: assert isinstance(o, (Literal, Name)), o
		super().__init__(where)
		self.operands = tuple(operands)
	def _key(self): return self.operands
	def __repr__(self): return "<%s %s %s>" % (type(self).__name__, list(self.operands), self.glyph)

class Add(Arithmetic): glyph = "+"
class Subtract(Arithmetic): glyph = "-"
class Multiply(Arithmetic): glyph = "*"
class Divide(Arithmetic): glyph = "/"
class Power(Arithmetic): glyph = "^"
class Modulo(Arithmetic): glyph = "%"

ARITHMETIC = (Add, Subtract, Multiply, Divide, Power, Modulo)
