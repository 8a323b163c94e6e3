import pytest

from cuesheet import config

def test_default_created(config_file):
	cfg = config.load()

	assert config_file.exists()
	assert cfg.CODING is None
	assert cfg.FLAC is True
	assert cfg.DUMP is None
	assert cfg.INDENT == 2

	# the written default must load to the same values
	again = config.load()
	assert (again.CODING, again.FLAC, again.DUMP, again.INDENT) == (None, True, None, 2)

def test_values(config_file):
	config_file.write_text(
		"[general]\ncoding = cp1251\nflac = no\n\n[output]\ndump = tree\nindent = 4\n")

	cfg = config.load()

	assert cfg.CODING == "cp1251"
	assert cfg.FLAC is False
	assert cfg.DUMP == "tree"
	assert cfg.INDENT == 4

def test_explicit_path(tmp_path):
	path = tmp_path / "other.cfg"
	path.write_text("[output]\ndump = cue\n")

	assert config.load(str(path)).DUMP == "cue"

@pytest.mark.parametrize("text,error", [
	("[general]\nflac = maybe\n", "general::flac: invalid bool"),
	("[output]\nindent = wide\n", "output::indent: invalid number"),
	("[output]\nindent = -1\n", "output::indent"),
	("[output]\ndump = xml\n", "output::dump"),
])
def test_invalid(config_file, text, error):
	config_file.write_text(text)

	with pytest.raises(Exception) as exc:
		config.load()

	assert error in str(exc.value)

def test_unknown_option(config_file):
	config_file.write_text("[general]\ncodepage = cp1251\n")

	with pytest.raises(Exception) as exc:
		config.load()

	assert "general::codepage: unknown option" in str(exc.value)

def test_empty_coding_is_autodetect(config_file):
	config_file.write_text("[general]\ncoding =\n")
	assert config.load().CODING is None
