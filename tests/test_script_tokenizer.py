#!/usr/bin/env python3

"""
Tests for the animation script tokenizer.
"""

# Standard Library
import os
import sys
import unittest

# PIP3 modules
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from svganimlib.core import errors
from svganimlib.core import script
from svganimlib.core import utils

#============================================

class TokenizerTest(unittest.TestCase):
	#============================================
	def setUp(self) -> None:
		utils.set_quiet_mode(True)

	#============================================
	def tearDown(self) -> None:
		utils.set_quiet_mode(False)

	#============================================
	def test_parses_show_hide_wait(self) -> None:
		"""Ensure each keyword yields the matching instruction."""
		text = "show cell1\nwait 1000\nhide cell1\n"
		instructions = script.tokenize(text)
		self.assertEqual(instructions, [
			script.Instruction(script.SHOW, object_id="cell1", line_number=1),
			script.Instruction(script.WAIT, duration_ms=1000, line_number=2),
			script.Instruction(script.HIDE, object_id="cell1", line_number=3),
		])

	#============================================
	def test_unrecognized_lines_are_ignored(self) -> None:
		"""Ensure comments, blank lines and unknown words produce nothing."""
		text = "// comment\n\n   \nfade a\n# show b\nshow a\n"
		instructions = script.tokenize(text)
		self.assertEqual(len(instructions), 1)
		self.assertEqual(instructions[0].object_id, "a")
		self.assertEqual(instructions[0].line_number, 6)

	#============================================
	def test_keyword_prefix_starts_an_instruction(self) -> None:
		"""Ensure lines are matched on their leading keyword text."""
		instructions = script.tokenize("showcase x\nwaiting 10\nhidden y\n")
		self.assertEqual(instructions, [
			script.Instruction(script.SHOW, object_id="x", line_number=1),
			script.Instruction(script.WAIT, duration_ms=10, line_number=2),
			script.Instruction(script.HIDE, object_id="y", line_number=3),
		])

	#============================================
	def test_joined_wait_value_keeps_its_slot(self) -> None:
		"""Ensure wait500 is a wait without a value, not an ignored line."""
		instructions = script.tokenize("show a\nwait500\nshow\tb\n")
		kinds = [instruction.kind for instruction in instructions]
		self.assertEqual(kinds, [script.SHOW, script.WAIT, script.SHOW])
		self.assertEqual(instructions[1].duration_ms, 0)
		self.assertEqual(instructions[2].object_id, "b")
		with self.assertRaises(errors.ParseError) as context:
			script.tokenize("show a\nwait500\n", strict=True)
		self.assertEqual(context.exception.line_number, 2)

	#============================================
	def test_line_numbers_follow_newlines_only(self) -> None:
		"""Ensure form feeds and other separators do not split lines."""
		with self.assertRaises(errors.ParseError) as context:
			script.tokenize("show a\x0c\r\nhide b\x0b\r\nwait x\r\n", strict=True)
		self.assertEqual(context.exception.line_number, 3)
		self.assertEqual(context.exception.line, "wait x")

	#============================================
	def test_indented_lines_and_extra_fields(self) -> None:
		"""Ensure surrounding whitespace and trailing fields are tolerated."""
		instructions = script.tokenize("\tshow a extra\n  wait 250 ms\r\n")
		self.assertEqual(instructions[0].object_id, "a")
		self.assertEqual(instructions[1].duration_ms, 250)

	#============================================
	def test_malformed_wait_is_zero_in_lenient_mode(self) -> None:
		"""Ensure a bad wait keeps its slot with zero duration."""
		instructions = script.tokenize("show a\nwait soon\nwait 500\n")
		self.assertEqual(len(instructions), 3)
		self.assertEqual(instructions[1].kind, script.WAIT)
		self.assertEqual(instructions[1].duration_ms, 0)
		self.assertEqual(instructions[1].line_number, 2)

	#============================================
	def test_missing_field_is_skipped_in_lenient_mode(self) -> None:
		"""Ensure a keyword without a value is dropped."""
		instructions = script.tokenize("show\nhide b\nwait\n")
		kinds = [instruction.kind for instruction in instructions]
		self.assertEqual(kinds, [script.HIDE, script.WAIT])
		self.assertEqual(instructions[1].duration_ms, 0)

	#============================================
	def test_strict_mode_raises_with_line_number(self) -> None:
		"""Ensure strict mode surfaces the first malformed line."""
		with self.assertRaises(errors.ParseError) as context:
			script.tokenize("show a\n# note\nwait 1.5\n", strict=True)
		self.assertEqual(context.exception.line_number, 3)
		self.assertEqual(context.exception.line, "wait 1.5")
		self.assertIn("line 3", str(context.exception))

	#============================================
	def test_strict_mode_rejects_missing_id(self) -> None:
		"""Ensure show without an id is a parse error."""
		with self.assertRaises(errors.ParseError) as context:
			script.tokenize("hide\n", strict=True)
		self.assertEqual(context.exception.line_number, 1)

	#============================================
	def test_negative_wait_is_rejected(self) -> None:
		"""Ensure durations must not be negative."""
		with self.assertRaises(errors.ParseError):
			script.parse_line("wait -10", 4)

	#============================================
	def test_instructions_are_immutable(self) -> None:
		"""Ensure parsed instructions cannot be changed."""
		instruction = script.parse_line("show a", 1)
		with self.assertRaises(AttributeError):
			instruction.object_id = "b"

#============================================

def test_lenient_mode_reports_warning(capsys) -> None:
	"""
	Ensure lenient parse errors are reported on stderr.
	"""
	utils.set_quiet_mode(False)
	script.tokenize("wait abc\n")
	captured = capsys.readouterr()
	assert "warning: line 1" in captured.err
	assert "wait abc" in captured.err

#============================================

def test_joined_wait_value_reports_warning(capsys) -> None:
	"""
	Ensure a wait with its value run into the keyword is reported.
	"""
	utils.set_quiet_mode(False)
	instructions = script.tokenize("showcase x\nwait500\nshow\tb\n")
	assert len(instructions) == 3
	captured = capsys.readouterr()
	assert "warning: line 2: wait requires a value" in captured.err

#============================================

def test_tokenize_file_missing_raises(tmp_path) -> None:
	"""
	Ensure unreadable scripts raise FileError.
	"""
	with pytest.raises(errors.FileError):
		script.tokenize_file(str(tmp_path / "missing.anim"))

#============================================

def test_tokenize_file_reads_script(tmp_path) -> None:
	"""
	Ensure scripts are read from disk.
	"""
	script_path = tmp_path / "demo.anim"
	script_path.write_text("show a\nwait 100\n", encoding="utf-8")
	instructions = script.tokenize_file(str(script_path))
	assert [instruction.kind for instruction in instructions] == [script.SHOW, script.WAIT]

#============================================

def test_summarize_counts_objects_in_order() -> None:
	"""
	Ensure the summary lists objects by first reference.
	"""
	instructions = script.tokenize("show b\nwait 10\nshow a\nhide b\n")
	summary = script.summarize(instructions)
	assert summary['instructions'] == 4
	assert summary['counts'] == {'show': 2, 'hide': 1, 'wait': 1}
	assert summary['objects'] == ['b', 'a']

#============================================

def main() -> None:
	"""Run the unit tests."""
	unittest.main()

#============================================

if __name__ == "__main__":
	main()
