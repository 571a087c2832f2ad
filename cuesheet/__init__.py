from . message import Kind, Message, WarningMessage, ErrorMessage
from . model import Position, Index, TrackData, FileData, CueSheet
from . parser import (
	CueParser, CueParserError, UnparseableLine, parse, parse_string,
	COMPLIANT_FILE_TYPES, COMPLIANT_FLAGS, COMPLIANT_DATA_TYPES,
)
from . reader import CueReadError, read, read_file
