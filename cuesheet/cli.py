from . import config, flac, reader, serializer
from . errors import CueError
from . serializer import quote
from . tools import *

import argparse
import logging

import signal
import sys
import os

CUE_EXT = ".cue"
FLAC_EXT = ".flac"

def print_messages(path, sheet):
	for msg in sheet.messages:
		printf("%s\n", format_message(path, msg))

def print_tree(sheet):
	for k, v in sheet.attrs():
		printf("%s: %s\n", k.upper(), quote(str(v)))

	for file in sheet.files:
		printf("FILE %s %s\n", quote(file.name or "-"), file.type or "-")

		spans = {track: (begin, end) for track, begin, end in file.spans()}

		for track in file.tracks:
			printf("\tTRACK %s", "--" if track.number is None else "%02d" % track.number)
			title = track.get("tracktitle")
			if title:
				printf(" %s", quote(title))

			if track in spans:
				printf(": %s", format_span(*spans[track]))
			printf("\n")

			for k, v in track.attrs():
				if k != "title":
					printf("\t\t%s: %s\n", k.upper(), quote(v))

			if track.flags:
				printf("\t\tFLAGS: %s\n", " ".join(sorted(track.flags)))

def print_cue(sheet, indent):
	printf("%s", serializer.dumps(sheet, " " * indent))

def find_files(path, with_flac):
	exts = (CUE_EXT, FLAC_EXT) if with_flac else (CUE_EXT,)
	lst = []

	for file in sorted(os.listdir(path)):
		fullname = os.path.join(path, file)
		if os.path.isfile(fullname) and file.lower().endswith(exts):
			lst.append(os.path.normpath(fullname))

	return lst

def collect(paths, with_flac):
	lst = []

	for path in paths:
		if os.path.isdir(path):
			found = find_files(path, with_flac)
			if not found:
				printerr("%s: no cue files", quote(path))
			lst.extend(found)
		else:
			lst.append(path)

	return lst

def load_sheet(path, options):
	if path.lower().endswith(FLAC_EXT):
		return flac.read_cuesheet(path)

	return reader.read(path, options.coding)

def process_file(path, options):
	try:
		sheet = load_sheet(path, options)
	except OSError as err:
		printerr("open %s: %s", quote(path), err.strerror or err)
		return False
	except CueError as err:
		printerr("%s: %s (%s)", quote(path), err, err.__class__.__name__)
		return False

	if sheet is None:
		printf("%s: no embedded cue sheet\n", path)
		return True

	if not options.quiet:
		print_messages(path, sheet)

	if options.dump == "tree":
		print_tree(sheet)
	elif options.dump == "cue":
		print_cue(sheet, options.indent)

	return True

class HelpFormatter(argparse.HelpFormatter):
	def __init__(self, *args, **kwargs):
		kwargs["max_help_position"] = 40
		argparse.HelpFormatter.__init__(self, *args, **kwargs)

def parse_args(argv, cfg):
	defaults = {
		"coding": cfg.CODING,
		"dump": cfg.DUMP,
		"flac": cfg.FLAC,
		"indent": cfg.INDENT,
	}

	parser = argparse.ArgumentParser(
		usage="%(prog)s [options] path [path ...]",
		formatter_class=HelpFormatter,
		description="cue sheet checker")

	parser.add_argument("paths", nargs="+", metavar="path",
		help="cue file, flac file or directory")

	parser.add_argument("--coding", help="encoding of cue files")

	parser.add_argument("--dump", choices=config.DUMP_MODES,
		help="print parsed sheets as cue text or as a tree")

	parser.add_argument("--indent", type=int, metavar="WIDTH",
		help="indentation width for --dump cue")

	parser.add_argument("--flac", dest="flac", action="store_true",
		help="read cue sheets embedded in flac files")

	parser.add_argument("--no-flac", dest="flac", action="store_false",
		help="skip flac files in directories")

	parser.add_argument("-q", "--quiet", action="store_true",
		help="do not print diagnostics")

	parser.add_argument("-v", "--verbose", action="store_true")

	parser.set_defaults(**defaults)

	return parser.parse_args(argv)

def sigint_handler(sig, frame):
	fatal("interrupted")

def main(argv = None):
	signal.signal(signal.SIGINT, sigint_handler)

	try:
		cfg = config.load()
	except Exception as err:
		fatal("load config failed: %s", err)

	options = parse_args(argv, cfg)

	if options.verbose:
		logging.basicConfig(level=logging.DEBUG, format="-- %(name)s: %(message)s")

	failed = 0
	for path in collect(options.paths, options.flac):
		if options.verbose:
			debug("check %s", quote(path))
		if not process_file(path, options):
			failed += 1

	if failed:
		printerr("%d file(s) failed", failed)
		return 1

	return 0

if __name__ == '__main__':
	sys.exit(main())
