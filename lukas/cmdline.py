"""
This is an evaluator for little postfix arithmetic scripts.

{0}

For example:

    lukas budget.rpn

will evaluate budget.rpn and print the answer, or else try to explain why not.

    lukas -e "1 2 3 +"

will evaluate the expression given right there on the command line.

    lukas -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path

parser = argparse.ArgumentParser(
	prog="lukas",
	description="Evaluator for line-oriented postfix arithmetic scripts.",
)
parser.add_argument("script", nargs="*", help="try examples/chained.rpn for example.")
parser.add_argument('-e', "--expression", action="append", default=[], help="Evaluate this text as a script. May be given more than once.")
parser.add_argument('-c', "--check", action="store_true", help="Parse the scripts but do not actually evaluate them.")
parser.add_argument('-t', "--trace", action="store_true", help="Show the accumulator after every command.")
parser.add_argument('-v', "--verbose", action="count", help="Chatter about progress on the standard error.")

def _each_script(args):
	""" Expressions first, then files, each paired with a way to fetch its text. """
	from .executive import read_script
	for i, text in enumerate(args.expression, 1):
		yield "<expression %d>"%i, lambda report, text=text: text
	for name in args.script:
		yield name, lambda report, path=Path(name): read_script(path, report)

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .executive import Yuck, check_text, run_text, render
	report = Report(verbose=args.verbose)
	failed = 0
	try:
		for label, fetch in _each_script(args):
			try:
				text = fetch(report)
				if args.check:
					check_text(text, label, report)
					print("%s: Looks plausible to me." % label, file=sys.stderr)
				else:
					evaluator = run_text(text, label, report)
					print(render(evaluator.accumulator))
					if args.trace:
						for step, answer in enumerate(evaluator.history, 1):
							print("%6d | %s" % (step, render(answer)), file=sys.stderr)
			except Yuck as ex:
				report.info("Giving up on %s during %s" % (label, ex.args[0]))
				failed += 1
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
	return 1 if failed else 0

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
