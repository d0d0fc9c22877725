from pathlib import Path
import unittest

from lukas import diagnostics, executive

base_folder = Path(__file__).parent.parent
examples = base_folder/"examples"

def _good(which):
	report = diagnostics.Report(verbose=False)
	try:
		evaluator = executive.run_file(examples / (which + ".rpn"), report)
	except executive.Yuck as ex:
		report.complain_to_console()
		assert False, "Test failed %s phase"%ex.args[0]
	else:
		report.assert_no_issues("Ostensibly-good example broke.")
		return evaluator

class ExampleSmokeTests(unittest.TestCase):
	""" Run all the examples; Test for no smoke. """
	
	def test_examples(self):
		for name, answer in [
			("chained", 21),
			("variables", 19),
			("aliases", 1),
		]:
			with self.subTest(name):
				self.assertEqual(answer, _good(name).accumulator)
	
	def test_mortgage(self):
		evaluator = _good("mortgage")
		self.assertAlmostEqual(1073.64, evaluator.accumulator, places=2)
		self.assertEqual({"rate", "growth", "denominator"}, set(evaluator.variables))
	
	def test_nothing(self):
		evaluator = _good("nothing")
		self.assertIsNone(evaluator.accumulator)
		self.assertEqual("No answer.", executive.render(evaluator.accumulator))

class RenderTests(unittest.TestCase):
	
	def test_render(self):
		for answer, text in [
			(None, "No answer."),
			(15.0, "15"),
			(-3.0, "-3"),
			(2.5, "2.5"),
			(float("inf"), "inf"),
			(float("nan"), "nan"),
		]:
			with self.subTest(text):
				self.assertEqual(text, executive.render(answer))

if __name__ == '__main__':
	unittest.main()
