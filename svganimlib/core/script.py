#!/usr/bin/env python3

"""
Animation script tokenizer.

A script holds one instruction per line:

	show <object_id>
	hide <object_id>
	wait <milliseconds>

Any other line is ignored.
"""

from dataclasses import dataclass
from svganimlib.core import errors
from svganimlib.core import utils

#============================================

SHOW = 'show'
HIDE = 'hide'
WAIT = 'wait'
KEYWORDS = (SHOW, HIDE, WAIT)

#============================================

@dataclass(frozen=True)
class Instruction():
	kind: str
	object_id: str = None
	duration_ms: int = 0
	line_number: int = 0

#============================================

def tokenize(text: str, strict: bool = False) -> list:
	"""
	Convert script text into an ordered list of instructions.

	Args:
		text: Raw script text.
		strict: Raise ParseError on malformed lines instead of reporting them.

	Returns:
		list: Instruction objects in script order.
	"""
	instructions = []
	for line_number, raw_line in enumerate(text.split("\n"), start=1):
		raw_line = raw_line.rstrip("\r")
		try:
			instruction = parse_line(raw_line, line_number)
		except errors.ParseError as error:
			if strict:
				raise
			utils.print_warning(str(error))
			instruction = _recover(raw_line, line_number)
		if instruction is not None:
			instructions.append(instruction)
	return instructions

#============================================

def tokenize_file(filepath: str, strict: bool = False) -> list:
	return tokenize(utils.read_text_file(filepath), strict=strict)

#============================================

def parse_line(raw_line: str, line_number: int = 0) -> Instruction:
	"""
	Parse one script line, returning None for lines that hold no instruction.

	A line is an instruction when it begins with a keyword, so `showcase x`
	reads as `show x` and `wait500` is a wait with no value.
	"""
	keyword = match_keyword(raw_line)
	if keyword is None:
		return None
	fields = raw_line.split()
	if len(fields) < 2:
		raise errors.ParseError(f"{keyword} requires a value", line_number, raw_line)
	if keyword == WAIT:
		duration_ms = _parse_duration(fields[1], line_number, raw_line)
		return Instruction(WAIT, duration_ms=duration_ms, line_number=line_number)
	return Instruction(keyword, object_id=fields[1], line_number=line_number)

#============================================

def match_keyword(raw_line: str) -> str:
	line = raw_line.lstrip()
	for keyword in KEYWORDS:
		if line.startswith(keyword):
			return keyword
	return None

#============================================

def _parse_duration(value: str, line_number: int, raw_line: str) -> int:
	try:
		duration_ms = int(value)
	except ValueError:
		raise errors.ParseError(f"wait value is not an integer: {value}",
			line_number, raw_line) from None
	if duration_ms < 0:
		raise errors.ParseError(f"wait value must not be negative: {value}",
			line_number, raw_line)
	return duration_ms

#============================================

def _recover(raw_line: str, line_number: int) -> Instruction:
	# a malformed wait still occupies its slot, with zero duration
	if match_keyword(raw_line) == WAIT:
		return Instruction(WAIT, duration_ms=0, line_number=line_number)
	return None

#============================================

def summarize(instructions: list) -> dict:
	counts = {keyword: 0 for keyword in KEYWORDS}
	object_ids = []
	for instruction in instructions:
		counts[instruction.kind] += 1
		if instruction.object_id is not None and instruction.object_id not in object_ids:
			object_ids.append(instruction.object_id)
	return {
		'instructions': len(instructions),
		'counts': counts,
		'objects': object_ids,
	}
