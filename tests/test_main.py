import io
import json
import unittest
import warnings
from contextlib import redirect_stdout, redirect_stderr
from signetparse.__main__ import main, parse_arguments


class TestCommandLine(unittest.TestCase):
	def run_main(self, *argv):
		with redirect_stdout(io.StringIO()) as out, redirect_stderr(io.StringIO()) as err:
			status = main(parse_arguments(list(argv)))
		return status, out.getvalue(), err.getvalue()

	def test_00_signature_as_json(self):
		status, out, err = self.run_main('name:string => *')
		self.assertEqual(0, status)
		self.assertEqual('', err)
		self.assertEqual([
			{'types': [{'name': 'name', 'type': 'string', 'subtype': [], 'optional': False}], 'dependent': None},
			{'types': [{'name': None, 'type': '*', 'subtype': [], 'optional': False}], 'dependent': None},
		], json.loads(out))

	def test_01_type_as_json(self):
		status, out, err = self.run_main('--type', '-i', 'test:[tuple<string;int>]')
		self.assertEqual(0, status)
		self.assertEqual({'name': 'test', 'type': 'tuple', 'subtype': ['string', 'int'], 'optional': True}, json.loads(out))
		self.assertIn('\n  "name"', out)

	def test_02_pretty(self):
		status, out, err = self.run_main('--pretty', 'a:int => int')
		self.assertEqual(['stage 0', '    a: int', 'output', '    int'], out.splitlines())
		status, out, err = self.run_main('--pretty', '-t', 'array< int >')
		self.assertEqual('array<int>\n', out)

	def test_03_missing_output(self):
		status, out, err = self.run_main('int')
		self.assertEqual(1, status)
		self.assertEqual('', out)
		self.assertEqual("Signature must contain an output declaration\n", err)

	def test_04_lenient(self):
		with warnings.catch_warnings():
			warnings.simplefilter('ignore')
			status, out, err = self.run_main('--lenient', 'int')
		self.assertEqual(0, status)
		self.assertEqual(1, len(json.loads(out)))

	def test_05_bad_constraint_is_illustrated(self):
		status, out, err = self.run_main('A < :: A:int => int')
		self.assertEqual(1, status)
		lines = err.splitlines()
		self.assertEqual(3, len(lines))
		self.assertTrue(lines[0].startswith("In column 1: Dependent constraint 'A <'"))
		self.assertEqual('     ^^^ near here', lines[2])

	def test_05a_caret_finds_the_failing_constraint(self):
		# The bad constraint repeats the text of a good one before it.
		status, out, err = self.run_main('A < B, A < :: A:int => int')
		self.assertEqual(1, status)
		lines = err.splitlines()
		self.assertTrue(lines[0].startswith("In column 8: Dependent constraint 'A <'"))
		self.assertEqual(' >>> A < B, A < :: A:int => int', lines[1])
		self.assertEqual(' '*12 + '^^^ near here', lines[2])

	def test_06_verbose(self):
		from signetparse.support import memo
		try:
			status, out, err = self.run_main('-v', 'a => b')
		finally:
			memo.VERBOSE = False
		self.assertIn("miss 'a => b'", out)


if __name__ == '__main__':
	unittest.main()
