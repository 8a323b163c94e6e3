import pytest

ALBUM_CUE = """\
REM GENRE Rock
REM DATE 1994
REM DISCID 860B640B
REM COMMENT "ExactAudioCopy v0.99pb4"
CATALOG 0724383473229
PERFORMER "The Band"
TITLE "Live at Home"
FILE "The Band - Live at Home.wav" WAVE
  TRACK 01 AUDIO
    TITLE "Intro"
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Second Song"
    PERFORMER "Guest Singer"
    ISRC USRC17607839
    INDEX 00 04:10:20
    INDEX 01 04:12:00
  TRACK 03 AUDIO
    FLAGS DCP PRE
    TITLE "Outro"
    INDEX 01 08:30:74
    POSTGAP 00:02:00
"""

@pytest.fixture
def album_cue():
	return ALBUM_CUE

@pytest.fixture
def cue_file(tmp_path):
	path = tmp_path / "album.cue"
	path.write_bytes(ALBUM_CUE.encode("utf-8"))
	return path

@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
	path = tmp_path / "cuesheet.cfg"
	monkeypatch.setenv("CUESHEET_CONFIG", str(path))
	return path
