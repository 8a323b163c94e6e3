import configparser
import os

CONFIG_FILE_PATH = "~/.cuesheet.cfg"

DUMP_MODES = ("cue", "tree")

# section, option, Config attribute, kind, default
OPTIONS = (
	("general", "coding", "CODING", "text", None),
	("general", "flac", "FLAC", "bool", True),
	("output", "dump", "DUMP", "text", None),
	("output", "indent", "INDENT", "int", 2),
)

def __create_default(name):
	with open(name, "w") as fp:
		fp.write(
"""[general]
# encoding of cue files (autodetected if not set)
# coding =

# look for cue sheets embedded into flac files
flac = true

[output]
# also print every parsed sheet: cue or tree
# dump =

# indentation width of printed cue sheets
indent = 2
""")

class CfgParser(configparser.RawConfigParser):
	"""Reads the options cuecheck knows about and rejects everything else."""

	readers = {
		"text": (configparser.RawConfigParser.get, None),
		"int": (configparser.RawConfigParser.getint, "invalid number"),
		"bool": (configparser.RawConfigParser.getboolean, "invalid bool"),
	}

	def value(self, section, option, kind, default = None):
		if not self.has_option(section, option):
			return default

		func, msg = self.readers[kind]
		try:
			value = func(self, section, option)
		except ValueError as err:
			raise Exception("%s::%s: %s" % (section, option, msg or err))

		if kind == "text" and not value:
			return default
		return value

	def check_known(self):
		known = {(section, option) for section, option, _, _, _ in OPTIONS}

		for section in self.sections():
			for option in self.options(section):
				if (section, option) not in known:
					raise Exception("%s::%s: unknown option" % (section, option))

class Config:
	def __init__(self, cfg):
		cfg.check_known()

		for section, option, attr, kind, default in OPTIONS:
			setattr(self, attr, cfg.value(section, option, kind, default))

		if self.DUMP is not None and self.DUMP not in DUMP_MODES:
			raise Exception("output::dump: must be one of %s" % ", ".join(DUMP_MODES))
		if self.INDENT < 0:
			raise Exception("output::indent: must not be negative")

def config_path():
	return os.path.expanduser(os.environ.get("CUESHEET_CONFIG") or CONFIG_FILE_PATH)

def load(path = None):
	path = path or config_path()

	cfg = CfgParser()
	if not cfg.read(path):
		__create_default(path)

	return Config(cfg)
