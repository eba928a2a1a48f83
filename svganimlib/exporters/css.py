#!/usr/bin/env python3

from svganimlib.core import utils
from svganimlib.core.timeline import Timeline

#============================================

DEFAULT_ID_PREFIX = "cell-"
DEFAULT_ANIMATION_PREFIX = "anim"
DEFAULT_PRECISION = 2

#============================================

class CssExporter():
	"""
	Render a compiled timeline as a <style> block of CSS animations.

	Each object gets an animation rule bound to `#<id_prefix><object_id>`
	and a matching @keyframes block. The id prefix must match the element
	ids used in the target SVG, otherwise the rules silently apply to nothing.
	"""
	def __init__(self, timeline: Timeline, id_prefix: str = DEFAULT_ID_PREFIX,
		animation_prefix: str = DEFAULT_ANIMATION_PREFIX,
		precision: int = DEFAULT_PRECISION):
		self.timeline = timeline
		self.id_prefix = id_prefix
		self.animation_prefix = animation_prefix
		self.precision = precision
		self.animation_counter = 0

	#============================
	def render(self) -> str:
		self.animation_counter = 0
		rules = []
		for object_id, frames in self.timeline.keyframes.items():
			animation_name = self._next_animation_name()
			rules.append(self._animation_rule(object_id, animation_name))
			rules.append(self._keyframes_rule(animation_name, frames))
		return "<style>\n" + "\n".join(rules) + "\n</style>"

	#============================
	def selector_for(self, object_id: str) -> str:
		return f"#{self.id_prefix}{object_id}"

	#============================
	def _animation_rule(self, object_id: str, animation_name: str) -> str:
		duration = self.timeline.total_duration_ms
		return (
			f"{self.selector_for(object_id)} {{ animation: {animation_name} "
			f"{duration}ms linear infinite normal forwards; }}"
		)

	#============================
	def _keyframes_rule(self, animation_name: str, frames: tuple) -> str:
		stages = []
		for frame in frames:
			stage = utils.format_number(frame.stage, self.precision)
			opacity = utils.format_number(frame.opacity, self.precision)
			stages.append(f"{stage}% {{ opacity: {opacity}; }}")
		return f"@keyframes {animation_name} {{ " + " ".join(stages) + " }"

	#============================
	def _next_animation_name(self) -> str:
		name = f"{self.animation_prefix}{self.animation_counter}"
		self.animation_counter += 1
		return name
