from pathlib import Path
import unittest
from unittest import mock

from lukas.diagnostics import Report, TooManyIssues
from lukas.executive import run_file, run_text, Yuck

class Silence(Report):
	def __init__(self, max_issues=30):
		super().__init__(verbose=False, max_issues=max_issues)
		self.complain_to_console = mock.Mock()
	pass

base_folder = Path(__file__).parent.parent
zoo_fail = base_folder/"zoo/fail"

def _identify_problem(folder:Path, filename:str):
	specimen_path = folder / filename
	report = Silence()
	try:
		run_file(specimen_path, report)
	except Yuck as ex:
		assert 0 == report.complain_to_console.call_count
		assert report.sick()
		return ex.args[0]
	else:
		report.assert_no_issues()
		return "failed to fail"

class ZooOfFail(unittest.TestCase):
	""" Tests that assert about failure modes. """

	def expect(self, folder, cases):
		for basename in cases:
			with self.subTest(basename):
				specimen = zoo_fail / folder / (basename + ".rpn")
				assert specimen.exists(), specimen
				self.assertEqual(folder, _identify_problem(zoo_fail / folder, basename + ".rpn"))

	def test_00_parse(self):
		self.expect("parse", (
			"unknown_command",
			"missing_operands",
			"missing_variable_name",
			"too_many_variable_names",
		))

	def test_01_evaluate(self):
		self.expect("evaluate", (
			"missing_variable",
			"no_values_in_queue",
			"assigned_twice",
		))
	
	def test_02_no_such_file(self):
		self.assertEqual("read", _identify_problem(zoo_fail, "there_is_no_such_file.rpn"))
	
	def test_03_unreadable(self):
		self.expect("read", (
			"not_utf8",
		))

class ReportTests(unittest.TestCase):
	
	def test_issue_points_at_the_culprit(self):
		report = Silence()
		with self.assertRaises(Yuck):
			run_text("1 2 +\n1 2 foo\n", "sample.rpn", report)
		[pic] = report.issues
		[ann] = pic.annotations
		self.assertEqual("sample.rpn", ann.path)
		self.assertEqual(slice(10, 13), ann.slice)
		self.assertEqual("UnknownCommand('foo')", ann.caption)
	
	def test_evaluation_issue(self):
		report = Silence()
		with self.assertRaises(Yuck) as cm:
			run_text("5 y +", "sample.rpn", report)
		self.assertEqual("evaluate", cm.exception.args[0])
		[pic] = report.issues
		self.assertEqual("MissingVariable('y')", pic.annotations[0].caption)
		self.assertIn("before anything was assigned", pic.as_text())
	
	def test_sick_once_something_goes_wrong(self):
		report = Silence()
		self.assertFalse(report.sick())
		run_text("1 2 +", "fine.rpn", report)
		self.assertFalse(report.sick())
		with self.assertRaises(Yuck):
			run_text("1 2 foo", "broken.rpn", report)
		self.assertTrue(report.sick())
	
	def test_too_many_issues(self):
		report = Silence(max_issues=2)
		with self.assertRaises(Yuck):
			run_text("foo", "one", report)
		with self.assertRaises(TooManyIssues):
			run_text("bar", "two", report)
	
	def test_assert_no_issues(self):
		report = Silence()
		report.assert_no_issues()
		with self.assertRaises(Yuck):
			run_text("=", "sample.rpn", report)
		with self.assertRaises(AssertionError):
			report.assert_no_issues("on purpose")
		self.assertEqual(1, report.complain_to_console.call_count)

if __name__ == '__main__':
	unittest.main()
