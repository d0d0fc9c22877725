"""
The overall control: read a script, parse it, run it, say what happened.

The core (front_end and evaluator) never touches files or the console.
Everything here is glue around it, so it files problems with a Report
rather than letting tracebacks escape.
"""
import math
from pathlib import Path
from typing import Optional
from boozetools.support.failureprone import SourceText

from .diagnostics import Report
from .front_end import parse_text, ScriptParseError
from .evaluator import Evaluator, EvaluationError
from . import syntax

class Yuck(Exception):
	"""
	The first argument will be the name of the phase fraught with error.
	The end-user might not care about this, but it's handy for testing.
	"""
	pass

def read_script(path:Path, report:Report) -> str:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return fh.read()
	except FileNotFoundError:
		report.no_such_file(path)
	except (OSError, UnicodeDecodeError) as ex:
		report.broken_file(path, ex)
	raise Yuck("read")

def check_text(text:str, path:str, report:Report) -> list[syntax.Command]:
	try: commands = parse_text(text)
	except ScriptParseError as ex:
		report.parse_error(path, SourceText(text), ex)
		raise Yuck("parse")
	report.info("Parsed %d command(s) from %s" % (len(commands), path))
	return commands

def run_text(text:str, path:str, report:Report) -> Evaluator:
	"""
	Parse and evaluate one script with a fresh evaluator.
	Returns the evaluator, whose accumulator is the answer and whose history tells the tale.
	"""
	commands = check_text(text, path, report)
	evaluator = Evaluator()
	try: evaluator.evaluate(commands)
	except EvaluationError as ex:
		report.evaluation_error(path, SourceText(text), ex)
		raise Yuck("evaluate")
	report.info("Evaluated %s with %d variable(s) assigned" % (path, len(evaluator.variables)))
	return evaluator

def run_file(path:Path, report:Report) -> Evaluator:
	return run_text(read_script(path, report), str(path), report)

def render(answer:Optional[float]) -> str:
	""" Whole numbers print as integers; anything else prints the way Python prints floats. """
	if answer is None: return "No answer."
	if math.isfinite(answer) and answer == int(answer): return str(int(answer))
	return repr(answer)
