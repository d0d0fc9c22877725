"""
Turn script text into a list of commands.

Each line stands alone: blank lines and comments vanish,
"= name" captures the accumulator, and anything else ends in
a selector word preceded by the operands it applies to.
Parsing stops at the first line that makes no sense.
"""
import re
from typing import Iterator, Optional
from boozetools.parsing.interface import ParseError
from . import syntax, primitive
from .ontology import Literal, Name, Token

class ScriptParseError(ParseError):
	""" Something about a line of script makes no sense. The slice says where. """
	hint = "I could not make sense of this line."
	def __init__(self, where:slice, *detail):
		super().__init__(*detail)
		self.where = where

class MissingVariableName(ScriptParseError):
	hint = "An assignment needs the name of the variable to assign, as in '= x'."

class TooManyVariableNames(ScriptParseError):
	hint = "An assignment captures into exactly one variable."

class MissingOperands(ScriptParseError):
	hint = "An operator needs at least one operand before it, as in '2 +'."

class UnknownCommand(ScriptParseError):
	hint = "The last word on a line must say what to do with the others."
	@property
	def token(self) -> str: return self.args[0]

_WORD = re.compile(r"\S+")

Word = tuple[str, slice]

def _each_line(text:str) -> Iterator[tuple[str, int]]:
	offset = 0
	for line in text.splitlines(keepends=True):
		yield line, offset
		offset += len(line)

def _words(line:str, offset:int) -> list[Word]:
	return [(m.group(), slice(offset+m.start(), offset+m.end())) for m in _WORD.finditer(line)]

def _between(first:Word, last:Word) -> slice:
	return slice(first[1].start, last[1].stop)

def parse_operand(text:str, where:slice) -> Token:
	""" Anything that reads as a float is a literal; everything else is a name. """
	try: return Literal(float(text), where)
	except ValueError: return Name(text, where)

def _parse_assignment(words:list[Word]) -> syntax.SetVar:
	marker, names = words[0], words[1:]
	if not names: raise MissingVariableName(marker[1])
	if len(names) > 1: raise TooManyVariableNames(_between(names[1], names[-1]), [w for w, _ in names])
	text, where = names[0]
	return syntax.SetVar(Name(text, where), _between(marker, names[0]))

def _parse_operation(words:list[Word]) -> syntax.Arithmetic:
	selector, where = words[-1]
	try: command = primitive.SELECTORS[selector]
	except KeyError: raise UnknownCommand(where, selector) from None
	if len(words) < 2: raise MissingOperands(where, selector)
	operands = [parse_operand(text, at) for text, at in words[:-1]]
	return command(operands, _between(words[0], words[-1]))

def parse_line(line:str, offset:int=0) -> Optional[syntax.Command]:
	words = _words(line, offset)
	if not words: return None
	first = words[0][0]
	if first.startswith(primitive.COMMENT): return None
	if first == primitive.ASSIGN: return _parse_assignment(words)
	return _parse_operation(words)

def parse_text(text:str) -> list[syntax.Command]:
	""" Pure function of the text: the same script always parses the same way. """
	commands = []
	for line, offset in _each_line(text):
		command = parse_line(line, offset)
		if command is not None:
			commands.append(command)
	return commands
