"""
Run a parsed script.

The evaluator keeps one accumulator, carried from each line to the next.
An arithmetic line folds the accumulator together with its own operands;
an assignment line moves the accumulator into a variable and leaves it empty.
The first failure stops the whole run.
"""
from typing import Optional, Sequence
from boozetools.support.foundation import Visitor
from . import syntax, primitive
from .ontology import Literal, Name, Token

class EvaluationError(Exception):
	""" The script parsed fine, but running it went wrong at the slice given. """
	hint = "Evaluation went wrong here."
	def __init__(self, where:slice, *detail):
		super().__init__(*detail)
		self.where = where

class MissingVariable(EvaluationError):
	hint = "This variable is used before anything was assigned to it."
	@property
	def name(self) -> str: return self.args[0]

class NoValuesInQueue(EvaluationError):
	hint = "There is nothing in the accumulator to assign. Did a previous line already capture it?"

class UnresolvedAccumulator(EvaluationError):
	hint = "The accumulator holds something other than a number. This is a bug in the evaluator."

class NothingToFold(EvaluationError):
	hint = "An operation ended up with no numbers at all to work on. This is a bug in the parser."

class Evaluator(Visitor):
	accumulator: Optional[float]
	variables: dict[str, float]
	history: list[Optional[float]]

	def __init__(self):
		self.accumulator = None
		self.variables = {}
		self.history = []
	
	def evaluate(self, commands:Sequence[syntax.Command]) -> Optional[float]:
		for command in commands:
			self.accumulator = self.visit(command)
			self.history.append(self.accumulator)
		return self.accumulator
	
	def resolve(self, token:Token) -> float:
		if isinstance(token, Literal): return token.value
		assert isinstance(token, Name), token
		try: return self.variables[token.text]
		except KeyError: raise MissingVariable(token.slice, token.text) from None
	
	def _carried(self, command:syntax.Command) -> Optional[float]:
		carried = self.accumulator
		if carried is None or isinstance(carried, float): return carried
		raise UnresolvedAccumulator(command.slice, carried)
	
	def visit_SetVar(self, command:syntax.SetVar) -> None:
		captured = self._carried(command)
		if captured is None: raise NoValuesInQueue(command.slice)
		self.variables[command.nom.text] = captured
		return None
	
	def visit_Add(self, command:syntax.Arithmetic) -> float:
		# Resolve everything before doing any arithmetic at all.
		numbers = [self.resolve(token) for token in command.operands]
		carried = self._carried(command)
		if carried is not None:
			numbers.insert(0, carried)
		if not numbers: raise NothingToFold(command.slice)
		fn = primitive.BINARY[type(command)]
		acc = numbers[0]
		for x in numbers[1:]:
			acc = fn(acc, x)
		return acc
	
	visit_Subtract = visit_Multiply = visit_Divide = visit_Power = visit_Modulo = visit_Add

def evaluate(commands:Sequence[syntax.Command]) -> Optional[float]:
	""" Run commands with a fresh evaluator, as every script deserves. """
	return Evaluator().evaluate(commands)
