"""Locations and tunables shared by the runefinder modules."""

UCD_URL = "http://www.unicode.org/Public/UNIDATA/UnicodeData.txt"

# Environment variable naming an alternative UnicodeData.txt location
UCD_PATH_ENV = "UCD_PATH"

# Stored in the user's home directory unless UCD_PATH_ENV is set
UCD_FILENAME = "UnicodeData.txt"

# Seconds between progress ticks while the database is downloading
PROGRESS_INTERVAL = 0.2

DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Field positions in a UnicodeData.txt record
FIELD_CODEPOINT = 0
FIELD_NAME = 1
FIELD_UNICODE_1_NAME = 10

REPLACEMENT_CHARACTER = "\ufffd"
