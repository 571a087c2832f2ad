from . parser import CueParserError, parse_string
from . import config

from chardet import detect as encoding_detect

class CueReadError(CueParserError):
	pass

def decode(data, coding = None, autodetect = True):
	if coding:
		try:
			return data.decode(coding)
		except (LookupError, UnicodeDecodeError) as err:
			raise CueReadError("decoding failed: %s" % err)

	try:
		return data.decode("utf-8-sig")
	except UnicodeDecodeError:
		if not autodetect:
			raise CueReadError("unknown encoding (autodetect is off)")

	encoding = encoding_detect(data).get("encoding")
	if encoding is None:
		raise CueReadError("autodetect failed")

	try:
		return data.decode(encoding)
	except (LookupError, UnicodeDecodeError):
		raise CueReadError("autodetect failed: invalid encoding %s" % encoding)

def read_file(filename, coding = None, autodetect = True):
	with open(filename, "rb") as fp:
		data = fp.read()

	return decode(data, coding, autodetect)

def read(filename, coding = None, error_handler = None, check_file_placement = None):
	"""Read and parse a cue sheet file.

	Every diagnostic is passed to error_handler(lineno, message) once
	parsing is done. IOError, CueReadError and config.ConfigError
	propagate to the caller.
	"""
	settings = config.load()
	if coding is None:
		coding = settings.coding
	if check_file_placement is None:
		check_file_placement = settings.check_file_placement

	text = read_file(filename, coding, settings.autodetect)
	cue = parse_string(text, check_file_placement)

	if error_handler:
		for msg in cue.messages:
			error_handler(msg.line, msg.message)

	return cue
