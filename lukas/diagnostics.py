import sys, random
from pathlib import Path
from typing import Any
from boozetools.support.failureprone import SourceText, illustration

from .front_end import ScriptParseError
from .evaluator import EvaluationError

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		'Heavens', "Mercy", 'Nuts', 'Rats', 'Woe is me',
	]
	
	resignations = [
		'I cannot continue.',
		'That does not add up.',
		'The accumulator weeps.',
		'I have no idea what the right answer is.',
	]
	
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

def describe(ex:Exception) -> str:
	""" The name of the failure, with whatever detail came along. """
	kind = type(ex).__name__
	if ex.args: return "%s(%s)" % (kind, ", ".join(map(repr, ex.args)))
	else: return kind

class Report:
	""" Collects the problems with one or more scripts, and explains them on request. """
	_issues : list["Pic"]
	
	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	@property
	def issues(self) -> list["Pic"]: return self._issues
	
	def sick(self): return bool(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)
	
	def assert_no_issues(self, message=""):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
	
	# Methods the executive calls when reading scripts:
	
	def no_such_file(self, path:Path):
		self.issue(Pic("I see no file called "+str(path), []))
	
	def broken_file(self, path:Path, cause:Exception):
		intro = "Something went pear-shaped while trying to read "+str(path)
		self.issue(Pic(intro, [], [str(cause)]))
	
	# Methods for when the core fails:
	
	def parse_error(self, path:str, source:SourceText, ex:ScriptParseError):
		intro = "I got confused by this script."
		self.issue(Pic(intro, [Annotation(path, source, ex.where, describe(ex))], [ex.hint]))
	
	def evaluation_error(self, path:str, source:SourceText, ex:EvaluationError):
		intro = "This script went wrong while running."
		self.issue(Pic(intro, [Annotation(path, source, ex.where, describe(ex))], [ex.hint]))

class Annotation:
	path: str
	source: SourceText
	slice: slice
	caption: str
	def __init__(self, path:str, source:SourceText, where:slice, caption:str=""):
		self.path = path
		self.source = source
		self.slice = where
		self.caption = caption
	def illustrate(self):
		row, col = self.source.find_row_col(self.slice.start)
		single_line = self.source.line_of_text(row)
		width = max(1, self.slice.stop - self.slice.start)
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self._intro, self._anns, self._footer = intro, anns, footer
	@property
	def intro(self): return self._intro
	@property
	def annotations(self): return self._anns
	def as_text(self):
		lines = [self._intro, ""]
		path = None
		for ann in self._anns:
			if ann.path != path:
				path = ann.path
				lines.append(str(path))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
