#!/usr/bin/env python3

from svganimlib.core import errors

#============================================

SVG_TAG = "<svg"

#============================================

def inject_style(svg_text: str, style_block: str) -> str:
	"""
	Insert a style block right after the opening <svg ...> tag.

	Args:
		svg_text: Source SVG markup.
		style_block: Complete <style>...</style> text.

	Returns:
		str: The SVG markup with the style block inserted.
	"""
	tag_start = svg_text.find(SVG_TAG)
	if tag_start == -1:
		raise errors.InjectionError("no <svg tag found in the input document")
	tag_end = svg_text.find('>', tag_start)
	if tag_end == -1:
		raise errors.InjectionError("the <svg tag is never closed with >")
	index = tag_end + 1
	return svg_text[:index] + style_block + svg_text[index:]
