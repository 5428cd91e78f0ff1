"""
Application constants and metadata.
"""

# Application info
APP_NAME = "tinyini"
APP_VERSION = "0.1.0"

# Section indices
GLOBAL_SECTION = 0  # Properties that precede any [section] header
NOT_FOUND = -1  # Returned by section lookups that match nothing

# Characters recognized by the scanner
WHITESPACE = " \t"
COMMENT_MARKERS = ";#"
DELIMITER = "="
NEWLINE = "\n"
