"""Write a Sheet back as cue sheet text.

Album data comes first, then every file with its tracks. Within a track the
commands are ordered so that the output parses without ordering warnings.
Comments other than the known REM forms and the original layout are not
preserved.
"""

import logging

LOG = logging.getLogger(__name__)

ALBUM_FIELDS = (
	("REM GENRE", "genre"),
	("REM DATE", "year"),
	("REM DISCID", "discid"),
	("REM COMMENT", "comment"),
	("REM DISCNUMBER", "discnumber"),
	("REM TOTALDISCS", "totaldiscs"),
	("CATALOG", "catalog"),
	("PERFORMER", "performer"),
	("TITLE", "title"),
	("SONGWRITER", "songwriter"),
	("CDTEXTFILE", "cdtextfile"),
)

TRACK_FIELDS = (
	("ISRC", "isrc"),
	("PERFORMER", "performer"),
	("TITLE", "title"),
	("SONGWRITER", "songwriter"),
)

def quote(value):
	if value == "" or any(ch.isspace() for ch in value):
		return '"%s"' % value
	return value

# taken verbatim by the parser, never unquoted
RAW_FIELDS = frozenset(("catalog", "isrc"))

def format_value(attr, value):
	if attr in RAW_FIELDS:
		return value
	if isinstance(value, int):
		return "%d" % value
	if isinstance(value, str):
		return quote(value)
	return str(value)

def command(name, *args):
	return " ".join([name] + [a for a in args if a is not None])

def sheet_lines(sheet, indent = "  "):
	for name, attr in ALBUM_FIELDS:
		value = getattr(sheet, attr)
		if value is not None:
			yield command(name, format_value(attr, value))

	for file in sheet.files:
		name = None if file.name is None else quote(file.name)
		yield command("FILE", name, file.type)

		for track in file.tracks:
			for line in track_lines(track, indent):
				yield indent + line

def track_lines(track, indent = "  "):
	number = None if track.number is None else "%02d" % track.number
	yield command("TRACK", number, track.datatype)

	if track.flags:
		yield indent + command("FLAGS", *sorted(track.flags))

	for name, attr in TRACK_FIELDS:
		value = getattr(track, attr)
		if value is not None:
			yield indent + command(name, format_value(attr, value))

	if track.pregap is not None:
		yield indent + command("PREGAP", str(track.pregap))

	for index in track.indexes:
		yield indent + command("INDEX", "%02d" % index.number, str(index.position))

	if track.postgap is not None:
		yield indent + command("POSTGAP", str(track.postgap))

def dumps(sheet, indent = "  "):
	LOG.debug("serializing cue sheet %s", sheet.file or "")
	return "".join(line + "\n" for line in sheet_lines(sheet, indent))

def dump(sheet, fp, indent = "  "):
	for line in sheet_lines(sheet, indent):
		fp.write(line + "\n")
