"""
Single-pass scanner for INI text.

Supports:
- Global properties (before any section header)
- Sections: [name]
- Properties: key = value
- Comments (; and #), including commented-out ("disabled") properties

The scanner reads the source once, left to right, one character at a time,
and never backtracks. Malformed input is handled leniently: an incomplete
key or section header is dropped and scanning continues on the next line.
"""

from enum import Enum, auto

from .const import COMMENT_MARKERS, DELIMITER, NEWLINE, WHITESPACE
from .document import IniDocument, Property, Section
from .logging import get_logger

logger = get_logger("parser")


class ParserState(Enum):
    """Scanner states."""

    EXPECT_KEY = auto()        # start of line, after a header or property
    PARSING_SECTION = auto()   # inside [ ... ], capturing the name
    SKIP_SECTION = auto()      # inside [ ... ], name already ended
    PARSING_KEY = auto()       # capturing a key
    EXPECT_SEPARATOR = auto()  # key ended on whitespace, waiting for =
    EXPECT_VALUE = auto()      # after =, skipping leading whitespace
    PARSING_VALUE = auto()     # capturing a value up to the newline


# States in which no token has been started, so comment markers count
_COMMENT_STATES = frozenset({
    ParserState.EXPECT_KEY,
    ParserState.EXPECT_SEPARATOR,
    ParserState.EXPECT_VALUE,
})

# What is lost when scanning gives up in a given state
_PENDING_TOKEN = {
    ParserState.PARSING_SECTION: "section header",
    ParserState.SKIP_SECTION: "section header",
    ParserState.PARSING_KEY: "key",
    ParserState.EXPECT_SEPARATOR: "property",
    ParserState.EXPECT_VALUE: "property",
}


class IniParser:
    """
    Lenient forward-only parser for INI text.

    Example:
        network=wireless

        [owner]
        name = John Doe   -> section 1, key "name", value "John Doe"
    """

    def __init__(self, source: str, filename: str = "<string>"):
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")

        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1

        self.state = ParserState.EXPECT_KEY
        self.sections: list[Section] = []
        self.properties: list[Property] = []

        # Token under construction
        self._token: list[str] = []
        self._token_line = 0
        self._key = ""

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Advance position and return current character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1

        if char == NEWLINE:
            self.line += 1

        return char

    def _skip_comment(self) -> None:
        """Skip to (not past) the next newline."""
        while self._current() and self._current() != NEWLINE:
            self._advance()

    def _start_token(self, char: str, state: ParserState) -> None:
        self._token = [char] if char else []
        self._token_line = self.line
        self.state = state

    def _take_token(self) -> str:
        text = "".join(self._token)
        self._token = []
        return text

    def _open_section(self) -> None:
        """Register the captured name as the next section."""
        section = Section(
            index=len(self.sections) + 1,
            name=self._take_token(),
            line=self._token_line,
        )
        self.sections.append(section)
        self.state = ParserState.EXPECT_KEY

    def _commit_property(self) -> None:
        """Add the pending key and captured value to the current section."""
        self.properties.append(
            Property(
                section=len(self.sections),
                key=self._key,
                value=self._take_token(),
                line=self._token_line,
            )
        )
        self._key = ""
        self.state = ParserState.EXPECT_KEY

    def _drop(self) -> None:
        """Abandon the pending token and resume at the next key."""
        logger.debug(
            f"{self.filename}:{self._token_line}: dropped incomplete "
            f"{_PENDING_TOKEN[self.state]}"
        )
        self._token = []
        self._key = ""
        self.state = ParserState.EXPECT_KEY

    def _step(self, char: str) -> None:
        """Feed one character (already consumed) to the state machine."""
        state = self.state

        if state is ParserState.EXPECT_KEY:
            if char in WHITESPACE or char == NEWLINE:
                return
            if char == "[":
                self._start_token("", ParserState.PARSING_SECTION)
                return
            # "=" here ends an empty key
            self._start_token("", ParserState.PARSING_KEY)
            self._step(char)

        elif state is ParserState.PARSING_SECTION:
            if char == "]":
                self._open_section()
            elif char == NEWLINE:
                self._drop()
            elif char in WHITESPACE or char == DELIMITER:
                # Leading whitespace is skipped; anything after the name is ignored
                if self._token:
                    self.state = ParserState.SKIP_SECTION
            else:
                self._token.append(char)

        elif state is ParserState.SKIP_SECTION:
            if char == "]":
                self._open_section()
            elif char == NEWLINE:
                self._drop()

        elif state is ParserState.PARSING_KEY:
            if char == DELIMITER:
                self._key = self._take_token()
                self.state = ParserState.EXPECT_VALUE
            elif char in WHITESPACE:
                self._key = self._take_token()
                self.state = ParserState.EXPECT_SEPARATOR
            elif char == NEWLINE:
                self._drop()
            else:
                self._token.append(char)

        elif state is ParserState.EXPECT_SEPARATOR:
            if char == DELIMITER:
                self.state = ParserState.EXPECT_VALUE
            elif char == NEWLINE:
                self._drop()
            # Anything else between the key and "=" is ignored

        elif state is ParserState.EXPECT_VALUE:
            if char in WHITESPACE:
                return
            if char == NEWLINE:
                self._commit_property()
                return
            self._start_token(char, ParserState.PARSING_VALUE)

        elif state is ParserState.PARSING_VALUE:
            if char == NEWLINE:
                self._commit_property()
            else:
                self._token.append(char)

    def parse(self) -> IniDocument:
        """Scan the entire source and build the document."""
        while self.pos < len(self.source):
            if self.state in _COMMENT_STATES and self._current() in COMMENT_MARKERS:
                self._skip_comment()
                continue
            self._step(self._advance())

        # A value cut off by the end of input is still committed
        if self.state is ParserState.PARSING_VALUE:
            self._commit_property()
        elif self.state is not ParserState.EXPECT_KEY:
            self._drop()

        logger.debug(
            f"Parsed {self.filename}: {len(self.sections)} sections, "
            f"{len(self.properties)} properties"
        )

        return IniDocument(
            sections=tuple(self.sections),
            properties=tuple(self.properties),
            filename=self.filename,
        )


def parse(source: str, filename: str = "<string>") -> IniDocument:
    """
    Parse INI text into a document.

    Args:
        source: Complete INI text
        filename: Name used in log messages and stored on the document

    Returns:
        Parsed IniDocument (never raises on malformed input)
    """
    return IniParser(source, filename).parse()
