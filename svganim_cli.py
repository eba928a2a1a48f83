#!/usr/bin/env python3

import argparse
import sys
import yaml
from svganimlib.core import errors
from svganimlib.core import utils
from svganimlib.core.project import AnimationProject

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Inject a show/hide/wait opacity animation into an SVG")
	parser.add_argument('svg_file', help='input SVG file')
	parser.add_argument('script_file', help='animation script with show/hide/wait lines')
	parser.add_argument('output_file', help='output SVG file')
	parser.add_argument('-c', '--config', dest='config_file',
		help='yaml config file with css and script options')
	parser.add_argument('-s', '--strict', dest='strict', action='store_true',
		help='fail on malformed script lines')
	parser.add_argument('-S', '--lenient', dest='strict', action='store_false',
		help='report malformed script lines and continue')
	parser.add_argument('-n', '--dry-run', dest='dry_run', action='store_true',
		help='validate only, do not write the output file')
	parser.add_argument('-p', '--dump-plan', dest='dump_plan', action='store_true',
		help='print the compiled timeline as yaml and exit')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='suppress info and warning messages')
	parser.add_argument('--id-prefix', dest='id_prefix',
		help='prefix joining object ids to svg element ids')
	parser.add_argument('--animation-prefix', dest='animation_prefix',
		help='prefix for generated animation names')
	parser.set_defaults(strict=None)
	args = parser.parse_args(argv)
	return args

#============================================

def main(argv: list = None) -> int:
	args = parse_args(argv)
	if args.quiet:
		utils.set_quiet_mode(True)
	try:
		project = AnimationProject(args.svg_file, args.script_file, args.output_file,
			config_file=args.config_file, strict=args.strict, dry_run=args.dry_run,
			id_prefix=args.id_prefix, animation_prefix=args.animation_prefix)
		if args.dump_plan:
			print(yaml.safe_dump(project.plan(), sort_keys=False))
			return 0
		project.run()
	except errors.AnimationError as error:
		utils.print_error(str(error))
		return 1
	return 0


if __name__ == '__main__':
	sys.exit(main())
