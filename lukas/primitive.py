"""
The primitive arithmetic, and the words a script may use to ask for it.

Python's own float operators raise where IEEE-754 would give an infinity or a NaN.
Scripts get the IEEE answer instead, so division by zero is a value, not a crash.
"""
import math
import operator
from . import syntax

def _divide(a:float, b:float) -> float:
	if b == 0:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)
	return a / b

def _is_odd_integer(x:float) -> bool:
	return math.isfinite(x) and x == int(x) and int(x) % 2 == 1

def _power(a:float, b:float) -> float:
	try: return math.pow(a, b)
	except OverflowError:
		return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
	except ValueError:
		# Zero to a negative power is the only pole; the rest are domain errors.
		if a == 0 and b < 0:
			return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
		return math.nan

def _modulo(a:float, b:float) -> float:
	# fmod keeps the sign of the dividend, unlike Python's % operator.
	try: return math.fmod(a, b)
	except ValueError: return math.nan

BINARY = {
	syntax.Add: operator.add,
	syntax.Subtract: operator.sub,
	syntax.Multiply: operator.mul,
	syntax.Divide: _divide,
	syntax.Power: _power,
	syntax.Modulo: _modulo,
}

SELECTORS = {}

def _selector(command:type, *words:str):
	for w in words:
		assert w not in SELECTORS, w
		SELECTORS[w] = command

_selector(syntax.Add, "+", "plus", "add")
_selector(syntax.Subtract, "-", "minus", "subtract")
_selector(syntax.Multiply, "x", "*", "times", "multiply")
_selector(syntax.Divide, "/", "div", "divide")
_selector(syntax.Power, "**", "^", "power")
_selector(syntax.Modulo, "%", "mod", "modulus", "modulo")

COMMENT = "#"
ASSIGN = "="
