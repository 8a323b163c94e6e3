"""Document model of a cue sheet.

The tree is Sheet -> FileEntry -> TrackEntry -> IndexEntry. Every entry also
keeps a reference to its parent so that track metadata can fall back to the
album values; the parent references never express ownership.

All classes can be built directly, e.g. from a cue sheet stored in binary
metadata, without going through the text parser.
"""

class Message:
	level = None

	def __init__(self, lineno, line, text):
		self.lineno = lineno
		self.line = line
		self.text = text

	def __str__(self):
		return "%d: %s: %s" % (self.lineno, self.level, self.text)

	def __repr__(self):
		return "<%s %d %r: %s>" % (self.__class__.__name__,
			self.lineno, self.line, self.text)

class WarningMessage(Message):
	level = "warning"

class ErrorMessage(Message):
	level = "error"

class IndexEntry:
	def __init__(self, number, position):
		self.number = number
		self.position = position

	def __eq__(self, other):
		if not isinstance(other, IndexEntry):
			return NotImplemented
		return self.number == other.number and self.position == other.position

	def __hash__(self):
		return hash((self.number, self.position))

	def __repr__(self):
		return "<IndexEntry %s %s>" % (self.number, self.position)

class TrackEntry:
	# fields looked up on the album when the track has no value of its own
	INHERITED = ("performer", "title", "songwriter")

	def __init__(self, number = None, datatype = None):
		self.number = number
		self.datatype = datatype
		self.isrc = None
		self.performer = None
		self.title = None
		self.songwriter = None
		self.pregap = None
		self.postgap = None
		self.flags = set()
		self.indexes = []
		self.file = None

	def add_index(self, index):
		self.indexes.append(index)
		return index

	def index(self, number):
		for entry in self.indexes:
			if entry.number == number:
				return entry
		return None

	def first_index(self):
		return self.indexes[0] if self.indexes else None

	def last_index(self):
		return self.indexes[-1] if self.indexes else None

	def start_index(self):
		"""Index 1 if present, else index 0, else None."""
		return self.index(1) or self.index(0)

	def isaudio(self):
		return self.datatype == "AUDIO"

	def get(self, attr, default = None):
		"""Look up a metadata field.

		"performer", "title" and "songwriter" fall back to the album value;
		"trackperformer", "tracktitle" and "tracksongwriter" do not. Fields
		the track does not carry are looked up on the sheet.
		"""
		if attr in self.INHERITED:
			value = getattr(self, attr)
			if value is None and self.file is not None and self.file.sheet is not None:
				value = self.file.sheet.get(attr)
		elif attr.startswith("track") and attr[5:] in self.INHERITED:
			value = getattr(self, attr[5:])
		elif attr == "tracknumber":
			value = self.number
		elif attr in ("isrc", "datatype"):
			value = getattr(self, attr)
		elif self.file is not None and self.file.sheet is not None:
			value = self.file.sheet.get(attr)
		else:
			value = None

		return default if value is None else value

	def attrs(self):
		lst = []
		for attr in ("isrc", "performer", "songwriter", "title"):
			value = getattr(self, attr)
			if value is not None:
				lst.append((attr, value))
		return lst

	def __repr__(self):
		return "<TrackEntry %s %s>" % (self.number, self.datatype)

class FileEntry:
	AUDIO_TYPES = ("WAVE", "AIFF", "MP3", "FLAC")

	def __init__(self, name = None, filetype = None):
		self.name = name
		self.type = filetype
		self.tracks = []
		self.sheet = None

	def add_track(self, track):
		track.file = self
		self.tracks.append(track)
		return track

	def indexes(self):
		return [index for track in self.tracks for index in track.indexes]

	def isaudio(self):
		return self.type in self.AUDIO_TYPES

	def spans(self):
		"""Return (track, begin, end) frame offsets of the tracks in this file.

		A track begins at its lowest non-zero index; the previous track ends
		where the next one's index 0 is, or where it begins. The last track
		ends with the file (end is None). Tracks without a non-zero index are
		left out.
		"""
		result = []
		previous = None

		for track in self.tracks:
			begin = [i.position.total_frames for i in track.indexes if i.number != 0]
			if not begin:
				continue
			begin = min(begin)

			if previous is not None:
				gap = track.index(0)
				end = begin if gap is None else gap.position.total_frames
				result[-1] = (previous, result[-1][1], end)

			result.append((track, begin, None))
			previous = track

		return result

	def __repr__(self):
		return "<FileEntry %s %s>" % (self.name, self.type)

class Sheet:
	FIELDS = (
		"catalog", "cdtextfile", "comment", "discid", "discnumber", "genre",
		"performer", "songwriter", "title", "totaldiscs", "year"
	)

	def __init__(self, file = None):
		self.file = file

		self.catalog = None
		self.cdtextfile = None
		self.performer = None
		self.title = None
		self.songwriter = None
		self.comment = None
		self.discid = None
		self.genre = None
		self.year = None
		self.discnumber = None
		self.totaldiscs = None

		self.files = []
		self.messages = []

	def add_file(self, file):
		file.sheet = self
		self.files.append(file)
		return file

	def tracks(self):
		return [track for file in self.files for track in file.tracks]

	def warning(self, lineno, line, text):
		msg = WarningMessage(lineno, line, text)
		self.messages.append(msg)
		return msg

	def error(self, lineno, line, text):
		msg = ErrorMessage(lineno, line, text)
		self.messages.append(msg)
		return msg

	def warnings(self):
		return [m for m in self.messages if isinstance(m, WarningMessage)]

	def errors(self):
		return [m for m in self.messages if isinstance(m, ErrorMessage)]

	def get(self, attr, default = None):
		if attr.startswith("album"):
			attr = attr[5:]

		if attr not in self.FIELDS:
			raise KeyError("unsupported field '%s'" % attr)

		value = getattr(self, attr)
		return default if value is None else value

	def attrs(self):
		return [(k, getattr(self, k)) for k in self.FIELDS if getattr(self, k) is not None]

	def __repr__(self):
		return "<Sheet %s: %d file(s), %d message(s)>" % (self.file,
			len(self.files), len(self.messages))
