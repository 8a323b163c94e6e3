"""Single pass cue sheet parser.

Every line is trimmed, dispatched on its first one or two characters and
handed to the handler of its command. Handlers validate the command and
update the sheet; anything suspicious is recorded as a message on the sheet
and parsing goes on with the next line. Nothing in the content of a cue sheet
makes the parser fail.
"""

import functools
import logging
import io
import re

from . import messages
from . model import Sheet, FileEntry, TrackEntry, IndexEntry
from . position import Position

LOG = logging.getLogger(__name__)

COMPLIANT_FILE_TYPES = frozenset(("BINARY", "MOTOROLA", "AIFF", "WAVE", "MP3"))

COMPLIANT_FLAGS = frozenset(("DCP", "4CH", "PRE", "SCMS", "DATA"))

COMPLIANT_DATA_TYPES = frozenset((
	"AUDIO",
	"CDG",
	"MODE1/2048",
	"MODE1/2352",
	"MODE2/2336",
	"MODE2/2352",
	"CDI/2336",
	"CDI/2352",
))

CDTEXT_MAX_LENGTH = 80

# a single token or a double quoted string
VALUE = r'("[^"]*"|\S+)'
TIMESTAMP = r"(\d*:\d*:\d*)"

def _compile(pattern):
	return re.compile(pattern, re.IGNORECASE | re.ASCII)

re_position = re.compile(r"^(\d*):(\d*):(\d*)$", re.ASCII)
re_catalog = re.compile(r"^\d{13}$", re.ASCII)
re_isrc = re.compile(r"^[A-Za-z0-9]{5}\d{7}$", re.ASCII)

re_file = _compile(r"^FILE\s+" + VALUE + r"\s+(\S+)\s*$")
re_cdtextfile = _compile(r"^CDTEXTFILE\s+" + VALUE + r"\s*$")
re_flags = _compile(r"^FLAGS((?:\s+\w+)*)\s*$")
re_index = _compile(r"^INDEX\s+(\d+)\s+" + TIMESTAMP + r"\s*$")
re_performer = _compile(r"^PERFORMER\s+" + VALUE + r"\s*$")
re_postgap = _compile(r"^POSTGAP\s+" + TIMESTAMP + r"\s*$")
re_pregap = _compile(r"^PREGAP\s+" + TIMESTAMP + r"\s*$")
re_songwriter = _compile(r"^SONGWRITER\s+" + VALUE + r"\s*$")
re_title = _compile(r"^TITLE\s+" + VALUE + r"\s*$")
re_track = _compile(r"^TRACK\s+(\d+)\s+(\S+)\s*$")

re_rem_comment = _compile(r"^(REM\s+COMMENT)\s+" + VALUE + r"\s*$")
re_rem_date = _compile(r"^(REM\s+DATE)\s+(\d+)\s*$")
re_rem_discid = _compile(r"^(REM\s+DISCID)\s+" + VALUE + r"\s*$")
re_rem_discnumber = _compile(r"^(REM\s+DISCNUMBER)\s+(\d+)\s*$")
re_rem_genre = _compile(r"^(REM\s+GENRE)\s+" + VALUE + r"\s*$")
re_rem_totaldiscs = _compile(r"^(REM\s+TOTALDISCS)\s+(\d+)\s*$")

class LineContext:
	"""One trimmed input line, its 1-based number and the sheet being built."""

	def __init__(self, lineno, line, sheet):
		self.lineno = lineno
		self.line = line
		self.sheet = sheet

	def warning(self, text):
		LOG.warning("%s:%d: %s", self.sheet.file or "<cue>", self.lineno, text)
		return self.sheet.warning(self.lineno, self.line, text)

	def error(self, text):
		LOG.error("%s:%d: %s", self.sheet.file or "<cue>", self.lineno, text)
		return self.sheet.error(self.lineno, self.line, text)

def unquote(value):
	if len(value) > 1 and value[0] == '"' and value[-1] == '"':
		return value[1:-1]
	return value

def starts_with(ctx, keyword, glued = False):
	"""Check the command keyword; a case mismatch only warns.

	Unless glued, the keyword must be followed by whitespace or the end of
	the line.
	"""
	head, rest = ctx.line[:len(keyword)], ctx.line[len(keyword):]

	if not glued and rest and not rest[0].isspace():
		return False

	if head == keyword:
		return True

	if head.upper() == keyword:
		ctx.warning(messages.TOKEN_NOT_UPPERCASE)
		return True

	return False

def command(keyword, pattern = None, glued = False):
	"""Wrap a handler with the keyword check and its line grammar.

	The handler receives the groups of pattern, or the rest of the line
	after the keyword when there is no pattern. Lines that do not fit are
	reported as unparseable and the handler is not called.
	"""
	def deco(func):
		@functools.wraps(func)
		def handler(ctx):
			if not starts_with(ctx, keyword, glued):
				ctx.warning(messages.UNPARSEABLE_INPUT)
				return

			if pattern is None:
				func(ctx, ctx.line[len(keyword):].strip())
				return

			m = pattern.match(ctx.line)
			if m is None:
				ctx.warning(messages.UNPARSEABLE_INPUT)
				return

			func(ctx, *m.groups())

		handler.keyword = keyword
		return handler
	return deco

def get_or_create_current_file(ctx):
	"""Return the last file of the sheet.

	Mutates the sheet: if no FILE was declared yet, an empty placeholder
	file is appended and a warning is recorded.
	"""
	files = ctx.sheet.files

	if not files:
		ctx.sheet.add_file(FileEntry())
		ctx.warning(messages.NO_FILE_SPECIFIED)

	return files[-1]

def get_or_create_current_track(ctx):
	"""Return the last track of the current file, creating a placeholder
	track (and possibly a placeholder file) with a warning when needed."""
	file = get_or_create_current_file(ctx)

	if not file.tracks:
		file.add_track(TrackEntry())
		ctx.warning(messages.NO_TRACK_SPECIFIED)

	return file.tracks[-1]

def parse_position(ctx, text):
	m = re_position.match(text)
	if m is None:
		ctx.warning(messages.UNPARSEABLE_INPUT)
		return Position()

	digits = m.groups()
	minutes, seconds, frames = [int(s) if s else 0 for s in digits]

	if any(len(s) != 2 for s in digits):
		ctx.warning(messages.WRONG_NUMBER_OF_DIGITS)

	if seconds > 59:
		ctx.warning(messages.INVALID_SECONDS_VALUE)

	if frames > 74:
		ctx.warning(messages.INVALID_FRAMES_VALUE)

	return Position(minutes, seconds, frames)

def set_cdtext(ctx, attr, value):
	# album data until the current file has a track, track data afterwards
	value = unquote(value)

	if len(value) > CDTEXT_MAX_LENGTH:
		ctx.warning(messages.FIELD_LENGTH_OVER_80)

	files = ctx.sheet.files
	if not files or not files[-1].tracks:
		target = ctx.sheet
	else:
		target = get_or_create_current_track(ctx)

	if getattr(target, attr) is not None:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	setattr(target, attr, value)

@command("CATALOG", glued=True)
def parse_catalog(ctx, value):
	if not re_catalog.match(value):
		ctx.warning(messages.INVALID_CATALOG_NUMBER)

	if ctx.sheet.catalog is not None:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	ctx.sheet.catalog = value

@command("FILE", re_file)
def parse_file(ctx, name, filetype):
	if filetype not in COMPLIANT_FILE_TYPES:
		if filetype.upper() in COMPLIANT_FILE_TYPES:
			ctx.warning(messages.TOKEN_NOT_UPPERCASE)
		else:
			ctx.warning(messages.NONCOMPLIANT_FILE_TYPE)

	ctx.sheet.add_file(FileEntry(unquote(name), filetype.upper()))

@command("CDTEXTFILE", re_cdtextfile)
def parse_cdtextfile(ctx, name):
	if ctx.sheet.cdtextfile is not None:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	ctx.sheet.cdtextfile = unquote(name)

@command("FLAGS", re_flags)
def parse_flags(ctx, tokens):
	flags = tokens.split()
	if not flags:
		ctx.warning(messages.NO_FLAGS)
		return

	track = get_or_create_current_track(ctx)

	if track.indexes:
		ctx.warning(messages.FLAGS_IN_WRONG_PLACE)

	if track.flags:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	# compared as written, unlike file types
	for flag in flags:
		if flag not in COMPLIANT_FLAGS:
			ctx.warning(messages.NONCOMPLIANT_FLAG)

	track.flags = set(flags)

@command("INDEX", re_index)
def parse_index(ctx, number, timestamp):
	if len(number) != 2:
		ctx.warning(messages.WRONG_NUMBER_OF_DIGITS)

	track = get_or_create_current_track(ctx)

	if track.postgap is not None:
		ctx.warning(messages.INDEX_AFTER_POSTGAP)

	number = int(number)

	if track.indexes:
		if track.indexes[-1].number != number - 1:
			ctx.warning(messages.INVALID_INDEX_NUMBER)
	elif number > 1:
		ctx.warning(messages.INVALID_INDEX_NUMBER)

	first = not track.file.indexes()
	position = parse_position(ctx, timestamp)

	if first and not position.iszero():
		ctx.warning(messages.INVALID_FIRST_POSITION)

	track.add_index(IndexEntry(number, position))

@command("ISRC", glued=True)
def parse_isrc(ctx, code):
	if not re_isrc.match(code):
		ctx.warning(messages.NONCOMPLIANT_ISRC_CODE)

	track = get_or_create_current_track(ctx)

	if track.indexes:
		ctx.warning(messages.ISRC_IN_WRONG_PLACE)

	if track.isrc is not None:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	track.isrc = code

@command("PERFORMER", re_performer)
def parse_performer(ctx, value):
	set_cdtext(ctx, "performer", value)

@command("SONGWRITER", re_songwriter)
def parse_songwriter(ctx, value):
	set_cdtext(ctx, "songwriter", value)

@command("TITLE", re_title)
def parse_title(ctx, value):
	set_cdtext(ctx, "title", value)

@command("POSTGAP", re_postgap)
def parse_postgap(ctx, timestamp):
	track = get_or_create_current_track(ctx)

	if track.postgap is not None:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	track.postgap = parse_position(ctx, timestamp)

@command("PREGAP", re_pregap)
def parse_pregap(ctx, timestamp):
	track = get_or_create_current_track(ctx)

	if track.pregap is not None:
		ctx.warning(messages.DATUM_APPEARS_TOO_OFTEN)

	if track.indexes:
		ctx.warning(messages.PREGAP_IN_WRONG_PLACE)

	track.pregap = parse_position(ctx, timestamp)

def parse_rem_comment(ctx, value):
	ctx.sheet.comment = unquote(value)

def parse_rem_date(ctx, value):
	year = int(value)
	if year < 1 or year > 9999:
		ctx.warning(messages.INVALID_YEAR)

	ctx.sheet.year = year

def parse_rem_discid(ctx, value):
	ctx.sheet.discid = unquote(value)

def parse_rem_discnumber(ctx, value):
	number = int(value)
	if number < 1:
		ctx.warning(messages.INVALID_DISCNUMBER)

	ctx.sheet.discnumber = number

def parse_rem_genre(ctx, value):
	ctx.sheet.genre = unquote(value)

def parse_rem_totaldiscs(ctx, value):
	number = int(value)
	if number < 1:
		ctx.warning(messages.INVALID_TOTALDISCS)

	ctx.sheet.totaldiscs = number

# Tried in order; REM lines matching none of them are free text.
REM_RULES = (
	(re_rem_comment, parse_rem_comment),
	(re_rem_date, parse_rem_date),
	(re_rem_discid, parse_rem_discid),
	(re_rem_discnumber, parse_rem_discnumber),
	(re_rem_genre, parse_rem_genre),
	(re_rem_totaldiscs, parse_rem_totaldiscs),
)

@command("REM")
def parse_rem(ctx, comment):
	# Rippers store metadata in comments. Known forms are parsed, anything
	# else is accepted silently; only the case of the keywords is checked.
	for pattern, func in REM_RULES:
		m = pattern.match(ctx.line)
		if m is None:
			continue

		keyword, value = m.groups()
		if keyword != keyword.upper():
			ctx.warning(messages.TOKEN_NOT_UPPERCASE)

		func(ctx, value)
		return

@command("TRACK", re_track)
def parse_track(ctx, number, datatype):
	if len(number) != 2:
		ctx.warning(messages.WRONG_NUMBER_OF_DIGITS)

	number = int(number)

	if datatype not in COMPLIANT_DATA_TYPES:
		ctx.warning(messages.NONCOMPLIANT_DATA_TYPE)

	tracks = ctx.sheet.tracks()
	if tracks:
		if tracks[-1].number != number - 1:
			ctx.warning(messages.INVALID_TRACK_NUMBER)
	elif number != 1:
		ctx.warning(messages.INVALID_TRACK_NUMBER)

	file = get_or_create_current_file(ctx)
	file.add_track(TrackEntry(number, datatype))

# Two leading characters identify a command; REM and SONGWRITER need one.
COMMANDS = {
	"ca":	parse_catalog,
	"cd":	parse_cdtextfile,
	"fi":	parse_file,
	"fl":	parse_flags,
	"in":	parse_index,
	"is":	parse_isrc,
	"pe":	parse_performer,
	"po":	parse_postgap,
	"pr":	parse_pregap,
	"ti":	parse_title,
	"tr":	parse_track,
}

INITIALS = {
	"r":	parse_rem,
	"s":	parse_songwriter,
}

def lookup(line):
	handler = INITIALS.get(line[:1].lower())
	if handler is None:
		handler = COMMANDS.get(line[:2].lower())
	return handler

def parse_line(ctx):
	if not ctx.line:
		ctx.warning(messages.EMPTY_LINES)
		return

	if len(ctx.line) < 2:
		ctx.warning(messages.UNPARSEABLE_INPUT)
		return

	handler = lookup(ctx.line)
	if handler is None:
		ctx.warning(messages.UNPARSEABLE_INPUT)
		return

	handler(ctx)

def parse(lines, file = None):
	"""Parse cue sheet text into a Sheet.

	lines is any iterable of text lines (an open text file, a list); a
	plain string is split into lines. file names the source on the sheet
	and in log records. Errors raised while reading lines propagate; cue
	sheet content never raises.
	"""
	if isinstance(lines, str):
		lines = io.StringIO(lines, newline=None)

	if file is None:
		LOG.debug("parsing cue sheet")
	else:
		LOG.debug("parsing cue sheet %s", file)

	sheet = Sheet(file)

	for lineno, line in enumerate(lines, 1):
		parse_line(LineContext(lineno, line.strip(), sheet))

	LOG.debug("parsed %d file(s), %d track(s), %d message(s)",
		len(sheet.files), len(sheet.tracks()), len(sheet.messages))

	return sheet
