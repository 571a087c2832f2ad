from cuesheet import CueParser, Kind, Position, Index, parse, parse_string

import io
import os

import pytest

DATA_DIR = os.path.join(os.path.dirname(__file__), "data")

def kinds(cue):
	return [msg.kind for msg in cue.messages]

def test_minimal_sheet_is_clean():
	cue = parse(['FILE "a.bin" BINARY', "TRACK 01 AUDIO", "INDEX 01 00:00:00"])

	assert cue.messages == []
	assert len(cue.file_data) == 1
	assert cue.file_data[0].filename == "a.bin"
	assert cue.file_data[0].filetype == "BINARY"

	tracks = cue.file_data[0].track_data
	assert len(tracks) == 1
	assert tracks[0].number == 1
	assert tracks[0].datatype == "AUDIO"
	assert tracks[0].indices == [Index(1, Position(0, 0, 0))]

def test_index_without_context_is_still_recorded():
	cue = parse(["INDEX 01 00:00:00"])

	assert kinds(cue) == [Kind.NO_FILE_SPECIFIED, Kind.NO_TRACK_SPECIFIED]
	assert len(cue.file_data) == 1

	fd = cue.file_data[0]
	assert fd.filename is None
	assert fd.filetype is None

	track = fd.track_data[0]
	assert track.number is None
	assert track.datatype is None
	assert track.indices == [Index(1, Position())]

def test_full_sheet():
	with open(os.path.join(DATA_DIR, "dark_side.cue")) as fp:
		cue = parse(fp)

	assert cue.messages == []
	assert cue.genre == "Progressive Rock"
	assert cue.year == 1973
	assert cue.discid == "860B640B"
	assert cue.comment == "ExactAudioCopy v0.99pb4"
	assert cue.catalog == "0724382975229"
	assert cue.performer == "Pink Floyd"
	assert cue.title == "The Dark Side of the Moon"

	fd, = cue.file_data
	assert fd.filename == "The Dark Side of the Moon.wav"
	assert [t.title for t in fd.track_data] == ["Speak to Me", "Breathe", "On the Run"]

	one, two, three = fd.track_data
	assert one.performer == "Pink Floyd"
	assert one.isrc == "GBN9Y1100001"
	assert one.flags == {"DCP"}

	assert two.pregap == Position(0, 2, 0)
	assert two.postgap == Position(0, 1, 0)
	assert two.indices == [Index(0, Position(3, 56, 50)), Index(1, Position(3, 58, 25))]

	assert three.songwriter == "Waters"
	assert three.performer is None

def test_empty_lines_are_reported():
	cue = parse(['FILE "a.bin" BINARY', "", "   ", "TRACK 01 AUDIO"])

	assert kinds(cue) == [Kind.EMPTY_LINE, Kind.EMPTY_LINE]
	assert [msg.line for msg in cue.messages] == [2, 3]
	assert len(cue.file_data[0].track_data) == 1

@pytest.mark.parametrize("text", ["X", "F", "XY something", "FX a.bin BINARY",
	"CX 1", "IX 1", "PX x", "TX x", "SPACE x", "12 34", "FI", "ISR"])
def test_unknown_commands_are_unparseable(text):
	cue = parse([text])

	assert kinds(cue) == [Kind.UNPARSEABLE_INPUT]
	assert cue.file_data == []

@pytest.mark.parametrize("text", ["FILE", "FILE a.bin", "TRACK 01", "TRACK xx AUDIO",
	"INDEX 01", "INDEX 01 0:0", "INDEX aa 00:00:00", "TITLE Two Words", "TITLE \"a\" b",
	"PREGAP 00:02", "TITLEX \"a\""])
def test_shape_mismatch_is_unparseable(text):
	cue = parse([text])

	assert kinds(cue) == [Kind.UNPARSEABLE_INPUT]
	assert cue.file_data == []
	assert cue.title is None
	assert cue.performer is None

def test_lowercase_keyword_is_accepted():
	cue = parse(["file a.bin BINARY"])

	assert kinds(cue) == [Kind.TOKEN_NOT_UPPERCASE]
	assert cue.file_data[0].filename == "a.bin"

def test_lowercase_keyword_with_bad_shape():
	cue = parse(["file a.bin"])

	assert kinds(cue) == [Kind.TOKEN_NOT_UPPERCASE, Kind.UNPARSEABLE_INPUT]
	assert cue.file_data == []

def test_messages_are_line_attributed():
	cue = parse_string('FILE "a.bin" BINARY\n  TRACK 01 FOO  \nBOGUS\n')

	first, second = cue.messages
	assert first.kind == Kind.NONCOMPLIANT_DATA_TYPE
	assert first.line == 2
	assert first.input == "TRACK 01 FOO"
	assert second.kind == Kind.UNPARSEABLE_INPUT
	assert second.line == 3
	assert second.input == "BOGUS"

def test_parse_string_ignores_trailing_newline():
	cue = parse_string('FILE "a.bin" BINARY\r\nTRACK 01 AUDIO\r\n')

	assert cue.messages == []
	assert len(cue.file_data[0].track_data) == 1

def test_parse_string_splits_on_line_breaks_only():
	cue = parse_string(u'FILE "a.bin" BINARY\rTRACK 01 AUDIO\rTITLE "a\x85b\x0cc\u2029d"\rBOGUS\n')

	assert [(msg.line, msg.kind) for msg in cue.messages] == [(4, Kind.UNPARSEABLE_INPUT)]
	assert cue.file_data[0].track_data[0].title == u"a\x85b\x0cc\u2029d"

def test_accepts_file_objects():
	cue = parse(io.StringIO('FILE "a.bin" BINARY\nTRACK 01 AUDIO\nINDEX 01 00:00:00\n'))

	assert cue.messages == []
	assert cue.file_data[0].track_data[0].indices == [Index(1, Position())]

def test_input_failure_propagates():
	def lines():
		yield 'FILE "a.bin" BINARY'
		raise IOError("device not ready")

	with pytest.raises(IOError):
		parse(lines())

def test_processing_continues_after_diagnostics():
	cue = parse([
		"garbage",
		'FILE "a.bin" NOPE',
		"TRACK 07 AUDIO",
		"INDEX 03 00:01:00",
		"TITLE \"Still parsed\"",
	])

	assert kinds(cue) == [
		Kind.UNPARSEABLE_INPUT,
		Kind.NONCOMPLIANT_FILE_TYPE,
		Kind.INVALID_TRACK_NUMBER,
		Kind.INVALID_INDEX_NUMBER,
		Kind.INVALID_FIRST_POSITION,
	]
	assert cue.file_data[0].track_data[0].title == "Still parsed"

def test_parser_object_is_reusable_as_cursor():
	parser = CueParser()
	parser.parse_line(1, 'FILE "a.bin" BINARY')
	parser.parse_line(2, "TRACK 01 AUDIO")

	assert parser.get_cue().file_data[0].track_data[0].number == 1
