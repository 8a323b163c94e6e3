"""Cue sheets embedded in FLAC files.

Two places are looked at: the binary CUESHEET metadata block, turned into a
Sheet directly, and a CUESHEET Vorbis comment, which holds plain cue sheet
text and goes through the regular parser. The block wins when both exist.
"""

import logging
import os

import mutagen.flac

from . errors import FlacError
from . model import Sheet, FileEntry, TrackEntry, IndexEntry
from . position import Position
from . parser import parse

LOG = logging.getLogger(__name__)

# lead-out track numbers for CD-DA and other media
LEADOUT_TRACKS = (170, 255)

DEFAULT_FILENAME = "self.flac"

def text_field(value):
	if isinstance(value, bytes):
		value = value.decode("ascii", "replace")
	value = value.strip("\0").strip()
	return value or None

class FlacReader:
	def __init__(self, fp, filename = None):
		self.fp = fp
		self.filename = filename

	def basename(self):
		if self.filename:
			return os.path.basename(self.filename)
		return DEFAULT_FILENAME

	def load(self):
		try:
			return mutagen.flac.FLAC(self.fp)
		except mutagen.flac.FLACNoHeaderError:
			LOG.debug("%s: not a flac stream", self.basename())
			return None
		except mutagen.MutagenError as err:
			raise FlacError("invalid flac metadata: %s" % err)

	def extract(self):
		"""Return the embedded Sheet, or None if the stream has none."""
		audio = self.load()
		if audio is None:
			return None

		if audio.cuesheet is not None:
			sheet = self.convert(audio.cuesheet, audio.info.sample_rate)
			if sheet is not None:
				return sheet

		if audio.tags is not None:
			texts = audio.tags.get("CUESHEET")
			if texts:
				return self.parse_embedded(texts[0])

		return None

	def convert(self, cuesheet, rate):
		if not rate:
			raise FlacError("CUESHEET block without sample rate")

		LOG.debug("%s: convert CUESHEET block", self.basename())

		sheet = Sheet(self.filename)
		sheet.catalog = text_field(cuesheet.media_catalog_number)

		file = sheet.add_file(FileEntry(self.basename(), "WAVE"))

		for entry in cuesheet.tracks:
			if entry.track_number == 0 or entry.track_number in LEADOUT_TRACKS:
				continue

			track = TrackEntry(entry.track_number, "MODE1/2352" if entry.type else "AUDIO")
			track.isrc = text_field(entry.isrc)
			if entry.pre_emphasis:
				track.flags.add("PRE")

			for index in entry.indexes:
				position = Position.from_samples(entry.start_offset + index.index_offset, rate)
				track.add_index(IndexEntry(index.index_number, position))

			file.add_track(track)

		if not file.tracks:
			return None

		return sheet

	def parse_embedded(self, text):
		LOG.debug("%s: parse CUESHEET vorbis comment", self.basename())

		sheet = parse(text, self.filename)

		# the embedded sheet describes the flac file itself
		if self.filename:
			for file in sheet.files:
				file.name = self.basename()

		return sheet

def read_cuesheet(filename):
	filename = os.fspath(filename)

	with open(filename, "rb") as fp:
		return FlacReader(fp, filename).extract()
