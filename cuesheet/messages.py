# Diagnostic texts attached to parsed sheets. Kept stable: callers match them verbatim.

EMPTY_LINES = "Empty lines not allowed. Will ignore"
UNPARSEABLE_INPUT = "Unparseable line. Will ignore"
INVALID_CATALOG_NUMBER = "Invalid catalog number"
NONCOMPLIANT_FILE_TYPE = "Noncompliant file type"
NO_FLAGS = "No flags specified"
NONCOMPLIANT_FLAG = "Noncompliant flag(s) specified"
WRONG_NUMBER_OF_DIGITS = "Wrong number of digits in number"
NONCOMPLIANT_ISRC_CODE = "ISRC code has noncompliant format"
FIELD_LENGTH_OVER_80 = "The field is too long to burn as CD-TEXT. The maximum length is 80"
NONCOMPLIANT_DATA_TYPE = "Noncompliant data type specified"
TOKEN_NOT_UPPERCASE = "Token has wrong case. Uppercase was expected"
INVALID_FRAMES_VALUE = "Position has invalid frame value, should be 00-74"
INVALID_SECONDS_VALUE = "Position has invalid seconds value, should be 00-59"
DATUM_APPEARS_TOO_OFTEN = "Datum appears too often"
FLAGS_IN_WRONG_PLACE = "A FLAGS datum must come after a TRACK, but before any INDEX of that TRACK"
NO_FILE_SPECIFIED = "Datum must appear in FILE, but no FILE specified"
NO_TRACK_SPECIFIED = "Datum must appear in TRACK, but no TRACK specified"
INVALID_INDEX_NUMBER = "Invalid index number. First number must be 0 or 1; all next ones sequential"
INVALID_FIRST_POSITION = "Invalid position. First index must have position 00:00:00"
ISRC_IN_WRONG_PLACE = "An ISRC datum must come after TRACK, but before any INDEX of TRACK"
PREGAP_IN_WRONG_PLACE = "A PREGAP datum must come after TRACK, but before any INDEX of that TRACK"
INDEX_AFTER_POSTGAP = "A POSTGAP datum must come after all INDEX data of a TRACK"
INVALID_DISCNUMBER = "Invalid disc number. Should be a number from 1"
INVALID_TOTALDISCS = "Invalid total discs. Should be a number from 1"
INVALID_TRACK_NUMBER = "Invalid track number. First number must be 1; all next ones sequential"
INVALID_YEAR = "Invalid year. Should be a number from 1 to 9999 (inclusive)"
