from . message import Kind, WarningMessage, ErrorMessage

import collections

FRAMES_PER_SECOND = 75

class Position(collections.namedtuple("Position", "minutes seconds frames")):
	"""CD timecode. Values are kept as read, even when out of range."""

	__slots__ = ()

	def __new__(cls, minutes = 0, seconds = 0, frames = 0):
		return super(Position, cls).__new__(cls, minutes, seconds, frames)

	def total_frames(self):
		return (self.minutes * 60 + self.seconds) * FRAMES_PER_SECOND + self.frames

	def __str__(self):
		return "%02d:%02d:%02d" % self

Index = collections.namedtuple("Index", "number position")

class TrackData:
	def __init__(self, number = None, datatype = None):
		self.number = number
		self.datatype = datatype
		self.flags = set()
		self.isrc = None
		self.performer = None
		self.songwriter = None
		self.title = None
		self.pregap = None
		self.postgap = None
		self.indices = []

	def __repr__(self):
		return "<TrackData %r %s>" % (self.number, self.datatype)

class FileData:
	def __init__(self, filename = None, filetype = None):
		self.filename = filename
		self.filetype = filetype
		self.track_data = []

	def all_indices(self):
		return [index for track in self.track_data for index in track.indices]

	def last_track(self, line):
		if not self.track_data:
			self.track_data.append(TrackData())
			line.warn(Kind.NO_TRACK_SPECIFIED)
		return self.track_data[-1]

	def __repr__(self):
		return "<FileData %s %s>" % (self.filename, self.filetype)

class CueSheet:
	def __init__(self):
		self.catalog = None
		self.cdtextfile = None
		self.performer = None
		self.songwriter = None
		self.title = None
		self.comment = None
		self.discid = None
		self.genre = None
		self.year = None

		self.file_data = []
		self.messages = []

	def all_track_data(self):
		return [track for fd in self.file_data for track in fd.track_data]

	def last_file(self, line):
		if not self.file_data:
			self.file_data.append(FileData())
			line.warn(Kind.NO_FILE_SPECIFIED)
		return self.file_data[-1]

	def add_warning(self, input, lineno, kind, message = None):
		self.messages.append(WarningMessage(input, lineno, kind, message))

	def add_error(self, input, lineno, kind, message = None):
		self.messages.append(ErrorMessage(input, lineno, kind, message))

	def warnings(self):
		return [msg for msg in self.messages if isinstance(msg, WarningMessage)]

	def errors(self):
		return [msg for msg in self.messages if isinstance(msg, ErrorMessage)]
