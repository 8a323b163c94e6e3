import logging
import io
import os

from chardet import detect as encoding_detect

from . errors import DecodeError
from . parser import parse

LOG = logging.getLogger(__name__)

def decode(data, coding = None):
	"""Decode raw cue sheet bytes.

	With no coding, UTF-8 (with or without BOM) is tried first, then the
	encoding guessed by chardet.
	"""
	if coding:
		try:
			return data.decode(coding)
		except LookupError:
			raise DecodeError("unknown encoding %s" % coding)
		except UnicodeDecodeError as err:
			raise DecodeError("decoding failed: %s" % err)

	try:
		return data.decode("utf-8-sig")
	except UnicodeDecodeError:
		pass

	enc = encoding_detect(data)
	encoding = enc["encoding"]
	if encoding is None:
		raise DecodeError("autodetect failed")

	LOG.debug("detected encoding %s (confidence %.2f)", encoding, enc["confidence"] or 0)

	try:
		return data.decode(encoding)
	except (LookupError, UnicodeDecodeError):
		raise DecodeError("autodetect failed: invalid encoding %s" % encoding)

def loads(data, coding = None, file = None):
	if isinstance(data, bytes):
		data = decode(data, coding)

	return parse(io.StringIO(data, newline=None), file)

def read_stream(fp, coding = None, file = None):
	return loads(fp.read(), coding, file)

def read(filename, coding = None):
	filename = os.fspath(filename)

	with open(filename, "rb") as fp:
		return read_stream(fp, coding, filename)
