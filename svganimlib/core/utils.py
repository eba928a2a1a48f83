#!/usr/bin/env python3

import os
import stat
import tempfile
from rich.console import Console
from svganimlib.core import errors

#============================================

NORD_COLORS = {
	'info': "#88C0D0",
	'warning': "#EBCB8B",
	'error': "#BF616A",
}

_console = Console(stderr=True, highlight=False)
_quiet_mode = os.environ.get('SVGANIM_QUIET', '') == '1'

#============================================

def set_quiet_mode(enabled: bool) -> None:
	global _quiet_mode
	_quiet_mode = bool(enabled)

#============================================

def is_quiet_mode() -> bool:
	return _quiet_mode

#============================================

def print_info(message: str) -> None:
	if _quiet_mode:
		return
	_console.print(message, style=NORD_COLORS['info'], markup=False,
		soft_wrap=True)

#============================================

def print_warning(message: str) -> None:
	if _quiet_mode:
		return
	_console.print(f"warning: {message}", style=NORD_COLORS['warning'], markup=False,
		soft_wrap=True)

#============================================

def print_error(message: str) -> None:
	_console.print(f"error: {message}", style=NORD_COLORS['error'], markup=False,
		soft_wrap=True)

#============================================

def format_number(value: float, precision: int = 2) -> str:
	"""
	Format a number with fixed precision, trimming trailing zeros.

	Args:
		value: Number to format.
		precision: Digits after the decimal point before trimming.

	Returns:
		str: Locale independent text such as "33.33", "100" or "0".
	"""
	text = f"{value:.{precision}f}"
	if '.' in text:
		text = text.rstrip('0').rstrip('.')
	if text in ("", "-0"):
		text = "0"
	return text

#============================================

def read_text_file(filepath: str) -> str:
	if not os.path.isfile(filepath):
		raise errors.FileError(f"file not found: {filepath}")
	try:
		with open(filepath, 'r', encoding='utf-8') as handle:
			return handle.read()
	except (OSError, UnicodeDecodeError) as error:
		raise errors.FileError(f"cannot read {filepath}: {error}") from error

#============================================

def write_text_file(filepath: str, text: str) -> None:
	"""
	Write text through a temporary file so a failed write leaves no partial output.

	An existing output file keeps its mode; a new one gets the umask default.
	"""
	out_dir = os.path.dirname(os.path.abspath(filepath))
	temp_path = None
	written = False
	try:
		(handle, temp_path) = tempfile.mkstemp(prefix=".svganim-", suffix=".tmp",
			dir=out_dir)
		with os.fdopen(handle, 'w', encoding='utf-8') as out_file:
			out_file.write(text)
		os.chmod(temp_path, _output_mode(filepath))
		os.replace(temp_path, filepath)
		written = True
	except OSError as error:
		raise errors.FileError(f"cannot write {filepath}: {error}") from error
	finally:
		if not written and temp_path is not None and os.path.exists(temp_path):
			os.remove(temp_path)

#============================================

def _output_mode(filepath: str) -> int:
	if os.path.exists(filepath):
		return stat.S_IMODE(os.stat(filepath).st_mode)
	umask = os.umask(0)
	os.umask(umask)
	return 0o666 & ~umask
