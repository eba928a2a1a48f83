#!/usr/bin/env python3

#============================================

class AnimationError(RuntimeError):
	pass

#============================================

class UsageError(AnimationError):
	pass

#============================================

class ConfigError(AnimationError):
	pass

#============================================

class FileError(AnimationError):
	pass

#============================================

class ParseError(AnimationError):
	def __init__(self, message: str, line_number: int = None, line: str = None):
		if line_number is not None:
			message = f"line {line_number}: {message}: {line!r}"
		super().__init__(message)
		self.line_number = line_number
		self.line = line

#============================================

class EmptyTimelineError(AnimationError):
	pass

#============================================

class InjectionError(AnimationError):
	pass
