class Kind:
	EMPTY_LINE		= "empty-line"
	UNPARSEABLE_INPUT	= "unparseable-input"
	INVALID_CATALOG_NUMBER	= "invalid-catalog-number"
	NONCOMPLIANT_FILE_TYPE	= "noncompliant-file-type"
	NO_FLAGS		= "no-flags"
	NONCOMPLIANT_FLAG	= "noncompliant-flag"
	WRONG_NUMBER_OF_DIGITS	= "wrong-number-of-digits"
	NONCOMPLIANT_ISRC_CODE	= "noncompliant-isrc-code"
	FIELD_TOO_LONG		= "field-too-long"
	NONCOMPLIANT_DATA_TYPE	= "noncompliant-data-type"
	TOKEN_NOT_UPPERCASE	= "token-not-uppercase"
	INVALID_FRAMES_VALUE	= "invalid-frames-value"
	INVALID_SECONDS_VALUE	= "invalid-seconds-value"
	DATUM_APPEARS_TOO_OFTEN	= "datum-appears-too-often"
	FILE_IN_WRONG_PLACE	= "file-in-wrong-place"
	FLAGS_IN_WRONG_PLACE	= "flags-in-wrong-place"
	NO_FILE_SPECIFIED	= "no-file-specified"
	NO_TRACK_SPECIFIED	= "no-track-specified"
	INVALID_INDEX_NUMBER	= "invalid-index-number"
	INVALID_FIRST_POSITION	= "invalid-first-position"
	ISRC_IN_WRONG_PLACE	= "isrc-in-wrong-place"
	PREGAP_IN_WRONG_PLACE	= "pregap-in-wrong-place"
	INDEX_AFTER_POSTGAP	= "index-after-postgap"
	INVALID_TRACK_NUMBER	= "invalid-track-number"
	INVALID_YEAR		= "invalid-year"

TEXT = {
	Kind.EMPTY_LINE:		"empty line not allowed",
	Kind.UNPARSEABLE_INPUT:		"unparseable input",
	Kind.INVALID_CATALOG_NUMBER:	"invalid catalog number, 13 digits expected",
	Kind.NONCOMPLIANT_FILE_TYPE:	"noncompliant file type",
	Kind.NO_FLAGS:			"no flags specified",
	Kind.NONCOMPLIANT_FLAG:		"noncompliant flag(s) specified",
	Kind.WRONG_NUMBER_OF_DIGITS:	"wrong number of digits in number",
	Kind.NONCOMPLIANT_ISRC_CODE:	"noncompliant ISRC format",
	Kind.FIELD_TOO_LONG:		"field too long for CD-TEXT, maximum length is 80",
	Kind.NONCOMPLIANT_DATA_TYPE:	"noncompliant data type",
	Kind.TOKEN_NOT_UPPERCASE:	"token not uppercase",
	Kind.INVALID_FRAMES_VALUE:	"invalid frames value, must be 00-74",
	Kind.INVALID_SECONDS_VALUE:	"invalid seconds value, must be 00-59",
	Kind.DATUM_APPEARS_TOO_OFTEN:	"datum appears too often",
	Kind.FILE_IN_WRONG_PLACE:	"FILE must come before everything else except REM and CATALOG",
	Kind.FLAGS_IN_WRONG_PLACE:	"FLAGS in wrong place, must follow TRACK and precede any INDEX",
	Kind.NO_FILE_SPECIFIED:		"datum must appear in FILE, but no FILE specified",
	Kind.NO_TRACK_SPECIFIED:	"datum must appear in TRACK, but no TRACK specified",
	Kind.INVALID_INDEX_NUMBER:	"invalid index number, first must be 0 or 1, next ones sequential",
	Kind.INVALID_FIRST_POSITION:	"invalid first position, first index of a file must be 00:00:00",
	Kind.ISRC_IN_WRONG_PLACE:	"ISRC in wrong place, must follow TRACK and precede any INDEX",
	Kind.PREGAP_IN_WRONG_PLACE:	"PREGAP in wrong place, must follow TRACK and precede any INDEX",
	Kind.INDEX_AFTER_POSTGAP:	"INDEX after POSTGAP, POSTGAP must follow all INDEX data",
	Kind.INVALID_TRACK_NUMBER:	"invalid track number, first must be 1, next ones sequential",
	Kind.INVALID_YEAR:		"invalid year, must be in range 1 .. 9999",
}

class Message:
	severity = None

	def __init__(self, input, line, kind, message = None):
		self.input = input
		self.line = line
		self.kind = kind
		self.message = message if message is not None else TEXT.get(kind, kind)

	def __str__(self):
		return "%s at line %d: %s (%s)" % (self.severity, self.line, self.message, self.input)

	def __repr__(self):
		return "<%s %s:%d>" % (self.__class__.__name__, self.kind, self.line)

class WarningMessage(Message):
	severity = "Warning"

class ErrorMessage(Message):
	severity = "Error"
