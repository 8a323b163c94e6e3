import io

from cuesheet import parse, serializer, Sheet, FileEntry, TrackEntry, IndexEntry, Position

def summary(sheet):
	album = sheet.attrs()
	files = []
	for file in sheet.files:
		tracks = []
		for track in file.tracks:
			tracks.append((
				track.number, track.datatype, track.attrs(), sorted(track.flags),
				track.pregap, track.postgap,
				[(i.number, i.position) for i in track.indexes],
			))
		files.append((file.name, file.type, tracks))
	return album, files

def test_round_trip(album_cue):
	sheet = parse(album_cue)
	text = serializer.dumps(sheet)
	again = parse(text)

	assert again.messages == []
	assert summary(again) == summary(sheet)

def test_layout():
	sheet = Sheet()
	sheet.title = "My Album"
	sheet.year = 2010

	file = sheet.add_file(FileEntry("disc one.wav", "WAVE"))
	track = file.add_track(TrackEntry(1, "AUDIO"))
	track.flags.update(("PRE", "DCP"))
	track.pregap = Position(0, 2, 0)
	track.add_index(IndexEntry(1, Position()))

	assert serializer.dumps(sheet, "\t") == (
		"REM DATE 2010\n"
		'TITLE "My Album"\n'
		'FILE "disc one.wav" WAVE\n'
		"\tTRACK 01 AUDIO\n"
		"\t\tFLAGS DCP PRE\n"
		"\t\tPREGAP 00:02:00\n"
		"\t\tINDEX 01 00:00:00\n"
	)

def test_dump():
	sheet = parse("REM COMMENT hello\nCATALOG 0724383473229\n")
	fp = io.StringIO()
	serializer.dump(sheet, fp)

	assert fp.getvalue() == "REM COMMENT hello\nCATALOG 0724383473229\n"

def test_quote():
	assert serializer.quote("plain") == "plain"
	assert serializer.quote("two words") == '"two words"'
	assert serializer.quote("") == '""'

def test_raw_fields_round_trip():
	sheet = parse([
		"CATALOG 0724 383473229",
		"FILE a.wav WAVE",
		"TRACK 01 AUDIO",
		"ISRC US RC17607839",
		"INDEX 01 00:00:00",
	])
	text = serializer.dumps(sheet)
	again = parse(text)

	assert "CATALOG 0724 383473229\n" in text
	assert again.catalog == sheet.catalog == "0724 383473229"
	assert again.tracks()[0].isrc == "US RC17607839"
