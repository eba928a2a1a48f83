#!/usr/bin/env python3

import os
from svganimlib.core import errors
from svganimlib.core import script
from svganimlib.core import utils
from svganimlib.core.loader import ConfigLoader
from svganimlib.core.timeline import TimelineCompiler
from svganimlib.exporters import svg
from svganimlib.exporters.css import CssExporter

#============================================

class AnimationProject():
	def __init__(self, svg_file: str, script_file: str, output_file: str,
		config_file: str = None, strict: bool = None, dry_run: bool = False,
		id_prefix: str = None, animation_prefix: str = None):
		self.svg_file = svg_file
		self.script_file = script_file
		self.output_file = output_file
		self.dry_run = dry_run
		self._check_paths()
		self.config = ConfigLoader(config_file).load()
		if strict is not None:
			self.config.strict = strict
		if id_prefix is not None:
			self.config.id_prefix = id_prefix
		if animation_prefix is not None:
			self.config.animation_prefix = animation_prefix
		self.instructions = None
		self.timeline = None
		self.style_block = None

	#============================
	def _check_paths(self) -> None:
		output_path = os.path.abspath(self.output_file)
		for input_file in (self.svg_file, self.script_file):
			if os.path.abspath(input_file) == output_path:
				raise errors.UsageError(f"output file would overwrite input: {input_file}")

	#============================
	def compile(self):
		self.instructions = script.tokenize_file(self.script_file,
			strict=self.config.strict)
		self.timeline = TimelineCompiler(self.instructions).compile()
		if self.timeline.clamped_count > 0:
			utils.print_warning(
				f"{self.timeline.clamped_count} keyframe stage(s) clamped, "
				"toggles are closer than one step"
			)
		exporter = CssExporter(self.timeline, id_prefix=self.config.id_prefix,
			animation_prefix=self.config.animation_prefix,
			precision=self.config.precision)
		self.style_block = exporter.render()
		return self.timeline

	#============================
	def render(self) -> str:
		if self.style_block is None:
			self.compile()
		svg_text = utils.read_text_file(self.svg_file)
		return svg.inject_style(svg_text, self.style_block)

	#============================
	def run(self) -> None:
		output_text = self.render()
		if self.dry_run:
			utils.print_info("dry run: validation complete")
			return
		utils.write_text_file(self.output_file, output_text)
		utils.print_info(
			f"wrote {self.output_file}: {len(self.timeline.keyframes)} object(s), "
			f"{self.timeline.total_duration_ms}ms"
		)

	#============================
	def plan(self) -> dict:
		if self.timeline is None:
			self.compile()
		return {
			'script': script.summarize(self.instructions),
			'config': self.config.as_dict(),
			'timeline': self.timeline.as_plan(),
		}
