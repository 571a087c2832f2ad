from . message import Kind
from . model import Position, Index, TrackData, FileData, CueSheet

import itertools
import io
import re

COMPLIANT_FILE_TYPES = frozenset(["BINARY", "MOTOROLA", "AIFF", "WAVE", "MP3"])

COMPLIANT_FLAGS = frozenset(["DCP", "4CH", "PRE", "SCMS", "DATA"])

COMPLIANT_DATA_TYPES = frozenset([
	"AUDIO", "CDG",
	"MODE1/2048", "MODE1/2352",
	"MODE2/2336", "MODE2/2352",
	"CDI/2336", "CDI/2352",
])

CDTEXT_MAX_LENGTH = 80

# bare word or double quoted string, no escapes
ARG = r'("[^"]*"|\S+)'
TIME = r"(\d+:\d+:\d+)"

re_position		= re.compile(r"^(\d+):(\d+):(\d+)$")
re_catalog_number	= re.compile(r"^\d{13}$")
re_isrc_code		= re.compile(r"^[A-Za-z0-9]{5}\d{7}$")

re_catalog		= re.compile(r"^CATALOG(?:\s+(.*))?$", re.I)
re_cdtextfile		= re.compile(r"^CDTEXTFILE\s+%s$" % ARG, re.I)
re_file			= re.compile(r"^FILE\s+%s\s+(\S+)$" % ARG, re.I)
re_flags		= re.compile(r"^FLAGS((?:\s+\S+)*)$", re.I)
re_index		= re.compile(r"^INDEX\s+(\d+)\s+%s$" % TIME, re.I)
re_isrc			= re.compile(r"^ISRC(?:\s+(.*))?$", re.I)
re_performer		= re.compile(r"^PERFORMER\s+%s$" % ARG, re.I)
re_postgap		= re.compile(r"^POSTGAP\s+%s$" % TIME, re.I)
re_pregap		= re.compile(r"^PREGAP\s+%s$" % TIME, re.I)
re_rem			= re.compile(r"^REM(?:\s+(.*))?$", re.I)
re_songwriter		= re.compile(r"^SONGWRITER\s+%s$" % ARG, re.I)
re_title		= re.compile(r"^TITLE\s+%s$" % ARG, re.I)
re_track		= re.compile(r"^TRACK\s+(\d+)\s+(\S+)$", re.I)

re_rem_comment		= re.compile(r"^(COMMENT)\s+%s$" % ARG, re.I)
re_rem_date		= re.compile(r"^(DATE)\s+(\d+)$", re.I)
re_rem_discid		= re.compile(r"^(DISCID)\s+%s$" % ARG, re.I)
re_rem_genre		= re.compile(r"^(GENRE)\s+%s$" % ARG, re.I)

class CueParserError(Exception):
	pass

class UnparseableLine(CueParserError):
	pass

def unquote(value):
	if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
		return value[1:-1]
	return value

class Line:
	"""One trimmed line of input bound to the sheet being built."""

	def __init__(self, number, text, sheet):
		self.number = number
		self.text = text
		self.sheet = sheet

	def warn(self, kind):
		self.sheet.add_warning(self.text, self.number, kind)

def command(keyword, pattern):
	def deco(func):
		def method(self, line):
			if not line.text.startswith(keyword):
				if line.text[:len(keyword)].upper() != keyword:
					raise UnparseableLine
				line.warn(Kind.TOKEN_NOT_UPPERCASE)

			match = pattern.match(line.text)
			if match is None:
				raise UnparseableLine

			func(self, line, *match.groups())
		method.__name__ = func.__name__
		method.__doc__ = func.__doc__
		return method
	return deco

class CueParser:
	def __init__(self, check_file_placement = False):
		self.cue = CueSheet()
		self.check_file_placement = check_file_placement

		self.commands = {
			"CA":	self.parse_catalog,
			"CD":	self.parse_cdtextfile,
			"FI":	self.parse_file,
			"FL":	self.parse_flags,
			"IN":	self.parse_index,
			"IS":	self.parse_isrc,
			"PE":	self.parse_performer,
			"PO":	self.parse_postgap,
			"PR":	self.parse_pregap,
			"RE":	self.parse_rem,
			"SO":	self.parse_songwriter,
			"TI":	self.parse_title,
			"TR":	self.parse_track,
		}

		self.rem_commands = {
			"C":	[(re_rem_comment, self.parse_rem_comment)],
			"D":	[(re_rem_date, self.parse_rem_date),
				 (re_rem_discid, self.parse_rem_discid)],
			"G":	[(re_rem_genre, self.parse_rem_genre)],
		}

	def get_cue(self):
		return self.cue

	def last_track(self, line):
		return self.cue.last_file(line).last_track(line)

	def set_attr(self, line, obj, attr, value):
		if getattr(obj, attr) is not None:
			line.warn(Kind.DATUM_APPEARS_TOO_OFTEN)

		setattr(obj, attr, value)

	def parse_position(self, line, time):
		match = re_position.match(time)
		if match is None:
			line.warn(Kind.UNPARSEABLE_INPUT)
			return Position()

		if any(len(group) != 2 for group in match.groups()):
			line.warn(Kind.WRONG_NUMBER_OF_DIGITS)

		minutes, seconds, frames = map(int, match.groups())
		if seconds > 59:
			line.warn(Kind.INVALID_SECONDS_VALUE)
		if frames > 74:
			line.warn(Kind.INVALID_FRAMES_VALUE)

		return Position(minutes, seconds, frames)

	def file_misplaced(self):
		cue = self.cue
		if cue.file_data:
			return False

		values = (cue.cdtextfile, cue.performer, cue.songwriter, cue.title,
			cue.comment, cue.discid, cue.genre, cue.year)
		return any(value is not None for value in values)

	@command("CATALOG", re_catalog)
	def parse_catalog(self, line, number):
		number = number or ""
		if not re_catalog_number.match(number):
			line.warn(Kind.INVALID_CATALOG_NUMBER)

		self.set_attr(line, self.cue, "catalog", number)

	@command("CDTEXTFILE", re_cdtextfile)
	def parse_cdtextfile(self, line, name):
		self.set_attr(line, self.cue, "cdtextfile", unquote(name))

	@command("FILE", re_file)
	def parse_file(self, line, name, filetype):
		if filetype not in COMPLIANT_FILE_TYPES:
			line.warn(Kind.NONCOMPLIANT_FILE_TYPE)

		# disabled unless requested
		if self.check_file_placement and self.file_misplaced():
			line.warn(Kind.FILE_IN_WRONG_PLACE)

		self.cue.file_data.append(FileData(unquote(name), filetype))

	@command("FLAGS", re_flags)
	def parse_flags(self, line, flags):
		flags = flags.split()
		if not flags:
			line.warn(Kind.NO_FLAGS)
			return

		track = self.last_track(line)
		if track.indices:
			line.warn(Kind.FLAGS_IN_WRONG_PLACE)
		if track.flags:
			line.warn(Kind.DATUM_APPEARS_TOO_OFTEN)

		for flag in flags:
			if flag not in COMPLIANT_FLAGS:
				line.warn(Kind.NONCOMPLIANT_FLAG)
			track.flags.add(flag)

	@command("INDEX", re_index)
	def parse_index(self, line, number, time):
		if len(number) != 2:
			line.warn(Kind.WRONG_NUMBER_OF_DIGITS)

		track = self.last_track(line)
		indices = track.indices

		# reported once, on the first index of the track
		if not indices and track.postgap is not None:
			line.warn(Kind.INDEX_AFTER_POSTGAP)

		number = int(number)
		if not indices and number > 1 or indices and indices[-1].number != number - 1:
			line.warn(Kind.INVALID_INDEX_NUMBER)

		first_in_file = not self.cue.last_file(line).all_indices()
		position = self.parse_position(line, time)
		if first_in_file and position != Position():
			line.warn(Kind.INVALID_FIRST_POSITION)

		indices.append(Index(number, position))

	@command("ISRC", re_isrc)
	def parse_isrc(self, line, code):
		code = code or ""
		if not re_isrc_code.match(code):
			line.warn(Kind.NONCOMPLIANT_ISRC_CODE)

		track = self.last_track(line)
		if track.indices:
			line.warn(Kind.ISRC_IN_WRONG_PLACE)

		self.set_attr(line, track, "isrc", code)

	def set_text(self, line, attr, value):
		"""PERFORMER, SONGWRITER and TITLE belong to the album until the
		current file gets its first track, and to that track afterwards.
		"""
		value = unquote(value)
		if len(value) > CDTEXT_MAX_LENGTH:
			line.warn(Kind.FIELD_TOO_LONG)

		# must not materialize a file just to look at it
		files = self.cue.file_data
		if not files or not files[-1].track_data:
			obj = self.cue
		else:
			obj = files[-1].track_data[-1]

		self.set_attr(line, obj, attr, value)

	@command("PERFORMER", re_performer)
	def parse_performer(self, line, value):
		self.set_text(line, "performer", value)

	@command("SONGWRITER", re_songwriter)
	def parse_songwriter(self, line, value):
		self.set_text(line, "songwriter", value)

	@command("TITLE", re_title)
	def parse_title(self, line, value):
		self.set_text(line, "title", value)

	@command("POSTGAP", re_postgap)
	def parse_postgap(self, line, time):
		track = self.last_track(line)
		if track.postgap is not None:
			line.warn(Kind.DATUM_APPEARS_TOO_OFTEN)

		track.postgap = self.parse_position(line, time)

	@command("PREGAP", re_pregap)
	def parse_pregap(self, line, time):
		track = self.last_track(line)
		if track.pregap is not None:
			line.warn(Kind.DATUM_APPEARS_TOO_OFTEN)
		if track.indices:
			line.warn(Kind.PREGAP_IN_WRONG_PLACE)

		track.pregap = self.parse_position(line, time)

	@command("REM", re_rem)
	def parse_rem(self, line, rest):
		"""Comment line. Some rippers keep album data here, those known
		sub-commands are picked up, anything else passes silently.
		"""
		if not rest:
			return

		for pattern, handler in self.rem_commands.get(rest[0].upper(), ()):
			match = pattern.match(rest)
			if match is None:
				continue

			keyword, value = match.groups()
			if keyword != keyword.upper():
				line.warn(Kind.TOKEN_NOT_UPPERCASE)

			handler(line, value)
			break

	def parse_rem_comment(self, line, value):
		self.cue.comment = unquote(value)

	def parse_rem_date(self, line, value):
		year = int(value)
		if year < 1 or year > 9999:
			line.warn(Kind.INVALID_YEAR)

		self.cue.year = year

	def parse_rem_discid(self, line, value):
		self.cue.discid = unquote(value)

	def parse_rem_genre(self, line, value):
		self.cue.genre = unquote(value)

	@command("TRACK", re_track)
	def parse_track(self, line, number, datatype):
		if len(number) != 2:
			line.warn(Kind.WRONG_NUMBER_OF_DIGITS)
		if datatype not in COMPLIANT_DATA_TYPES:
			line.warn(Kind.NONCOMPLIANT_DATA_TYPE)

		# numbering runs across the whole sheet, not per file
		number = int(number)
		tracks = self.cue.all_track_data()
		if not tracks and number != 1 or tracks and tracks[-1].number != number - 1:
			line.warn(Kind.INVALID_TRACK_NUMBER)

		self.cue.last_file(line).track_data.append(TrackData(number, datatype))

	def parse_default(self, line):
		raise UnparseableLine

	def parse_line(self, lineno, text):
		line = Line(lineno, text.strip(), self.cue)
		if not line.text:
			line.warn(Kind.EMPTY_LINE)
			return

		handler = self.commands.get(line.text[:2].upper(), self.parse_default)
		try:
			handler(line)
		except UnparseableLine:
			line.warn(Kind.UNPARSEABLE_INPUT)

	def parse(self, lines):
		for text, lineno in zip(lines, itertools.count(1)):
			self.parse_line(lineno, text)

		return self.cue

def parse(lines, check_file_placement = False):
	return CueParser(check_file_placement).parse(lines)

def physical_lines(text):
	# only \n, \r and \r\n end a line, not the other unicode separators
	return io.StringIO(text, newline = None)

def parse_string(text, check_file_placement = False):
	return parse(physical_lines(text), check_file_placement)
