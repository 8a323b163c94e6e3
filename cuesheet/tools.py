import sys
import os

from . position import Position

progname = os.path.basename(sys.argv[0]) or "cuecheck"

def printf(fmt, *args):
	sys.stdout.write(fmt % args if args else fmt)

def printerr(fmt, *args):
	msg = fmt % args if args else fmt
	sys.stderr.write("%s: %s\n" % (progname, msg.rstrip("\n")))

def fatal(fmt, *args):
	printerr(fmt, *args)
	sys.exit(1)

def debug(fmt, *args):
	msg = fmt % args if args else fmt
	sys.stderr.write("-- %s\n" % msg.rstrip("\n"))

def format_message(path, msg):
	"""One diagnostic in compiler style: path:line: level: text [line]."""
	return "%s:%d: %s: %s [%s]" % (path, msg.lineno, msg.level, msg.text, msg.line)

def format_span(begin, end = None):
	if end is None:
		return "%s -" % Position.from_frames(begin)
	return "%s - %s" % (Position.from_frames(begin), Position.from_frames(end))
