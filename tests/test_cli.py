import signal

import pytest

from cuesheet import cli, messages

from test_flac import album

@pytest.fixture(autouse=True)
def handlers(monkeypatch):
	installed = {}
	monkeypatch.setattr(signal, "signal", lambda sig, func: installed.__setitem__(sig, func))
	return installed

def test_sigint_handler_installed(cue_file, handlers):
	assert cli.main([str(cue_file)]) == 0
	assert handlers[signal.SIGINT] is cli.sigint_handler

def test_sigint_exits(capsys):
	with pytest.raises(SystemExit) as exc:
		cli.sigint_handler(signal.SIGINT, None)
	assert exc.value.code == 1
	assert "interrupted" in capsys.readouterr().err

def test_clean_file(cue_file, capsys):
	assert cli.main([str(cue_file)]) == 0

	out, err = capsys.readouterr()
	assert out == ""
	assert err == ""

def test_messages_printed(tmp_path, capsys):
	path = tmp_path / "bad.cue"
	path.write_text("FILE a.wav WAVE\nCATALOG 123\n")

	assert cli.main([str(path)]) == 0

	out, _ = capsys.readouterr()
	assert out == "%s:2: warning: %s [CATALOG 123]\n" % (path, messages.INVALID_CATALOG_NUMBER)

def test_quiet(tmp_path, capsys):
	path = tmp_path / "bad.cue"
	path.write_text("BOGUS\n")

	assert cli.main(["-q", str(path)]) == 0
	assert capsys.readouterr().out == ""

def test_missing_file_does_not_stop(tmp_path, cue_file, capsys):
	missing = tmp_path / "missing.cue"

	assert cli.main(["--dump", "cue", str(missing), str(cue_file)]) == 1

	out, err = capsys.readouterr()
	assert "missing.cue" in err
	assert "1 file(s) failed" in err
	assert "TRACK 03 AUDIO" in out

def test_bad_coding(cue_file, capsys):
	assert cli.main(["--coding", "no-such-coding", str(cue_file)]) == 1
	assert "unknown encoding" in capsys.readouterr().err

def test_dump_tree(cue_file, capsys):
	assert cli.main(["--dump", "tree", str(cue_file)]) == 0

	out, _ = capsys.readouterr()
	assert 'TITLE: "Live at Home"' in out
	assert 'FILE "The Band - Live at Home.wav" WAVE' in out
	assert '\tTRACK 02 "Second Song": 04:12:00 - 08:30:74\n' in out
	assert "\t\tFLAGS: DCP PRE\n" in out

def test_dump_cue_indent(cue_file, capsys):
	assert cli.main(["--dump", "cue", "--indent", "4", str(cue_file)]) == 0
	assert "\n    TRACK 01 AUDIO\n        TITLE Intro\n" in capsys.readouterr().out

def test_directory(tmp_path, cue_file, capsys):
	album(tmp_path / "album.flac")
	(tmp_path / "notes.txt").write_text("BOGUS\n")

	assert cli.main(["--dump", "cue", str(tmp_path)]) == 0

	out, _ = capsys.readouterr()
	assert 'FILE album.flac WAVE' in out
	assert 'FILE "The Band - Live at Home.wav" WAVE' in out

def test_directory_no_flac(tmp_path, cue_file, capsys):
	album(tmp_path / "album.flac")

	assert cli.main(["--no-flac", "--dump", "cue", str(tmp_path)]) == 0
	assert "album.flac" not in capsys.readouterr().out

def test_flac_without_cuesheet(tmp_path, capsys):
	path = tmp_path / "plain.flac"
	path.write_bytes(b"RIFF")

	assert cli.main([str(path)]) == 0
	assert "no embedded cue sheet" in capsys.readouterr().out

def test_config_defaults(config_file, cue_file, capsys):
	config_file.write_text("[output]\ndump = tree\n")

	assert cli.main([str(cue_file)]) == 0
	assert "TRACK 01" in capsys.readouterr().out

def test_usage_error(capsys):
	with pytest.raises(SystemExit) as exc:
		cli.main([])
	assert exc.value.code == 2

def test_bad_config(config_file, cue_file, capsys):
	config_file.write_text("[output]\nindent = x\n")

	with pytest.raises(SystemExit) as exc:
		cli.main([str(cue_file)])
	assert exc.value.code == 1
	assert "load config failed" in capsys.readouterr().err
