"""
INI loader: file reading and decoding.

The parser works on one complete in-memory string. This module produces
that string from a file (reading bytes, detecting the text encoding and
normalizing line endings) and owns every I/O error.
"""

from pathlib import Path

import chardet

from .document import IniDocument, IniError
from .logging import get_logger
from .parser import parse

logger = get_logger("loader")


class IniLoadError(IniError):
    """Exception raised when an INI file cannot be loaded."""

    pass


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class IniLoader:
    """
    Loads INI documents from files or strings.

    Usage:
        loader = IniLoader()
        doc = loader.load_file("settings.ini")
        # or
        doc = loader.load_string(ini_text)
    """

    FALLBACK_ENCODING = "latin-1"

    def __init__(self, encoding: str | None = None, min_confidence: float = 0.8):
        self.encoding = encoding
        self.min_confidence = min_confidence
        self.last_document: IniDocument | None = None
        self.last_encoding: str | None = None

    def decode(self, raw: bytes) -> str:
        """
        Decode file contents to text.

        With an explicit encoding, decoding errors are reported. Otherwise
        UTF-8 (with or without BOM) is tried first, then the encoding
        guessed by chardet, then latin-1, which accepts any byte string.

        Raises:
            IniLoadError: If the explicit encoding is unknown or doesn't fit
        """
        if self.encoding is not None:
            try:
                text = raw.decode(self.encoding)
            except (LookupError, UnicodeDecodeError) as e:
                raise IniLoadError(f"Cannot decode as {self.encoding}: {e}") from e
            self.last_encoding = self.encoding
            return text

        try:
            text = raw.decode("utf-8-sig")
            self.last_encoding = "utf-8"
            return text
        except UnicodeDecodeError:
            pass

        guess = chardet.detect(raw)
        encoding = guess.get("encoding")
        confidence = guess.get("confidence") or 0.0
        logger.debug(f"Detected encoding {encoding} (confidence {confidence:.2f})")

        if encoding and confidence >= self.min_confidence:
            try:
                text = raw.decode(encoding)
                self.last_encoding = encoding
                return text
            except (LookupError, UnicodeDecodeError):
                logger.debug(f"Detected encoding {encoding} failed, using fallback")

        self.last_encoding = self.FALLBACK_ENCODING
        return raw.decode(self.FALLBACK_ENCODING)

    def load_file(self, path: str | Path) -> IniDocument:
        """
        Load a document from a file.

        Args:
            path: Path to the INI file

        Returns:
            Parsed IniDocument

        Raises:
            IniLoadError: If the file cannot be found, read or decoded
        """
        path = Path(path)

        if not path.exists():
            raise IniLoadError(f"INI file not found: {path}")

        if not path.is_file():
            raise IniLoadError(f"Not a file: {path}")

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise IniLoadError(f"Failed to read {path}: {e}") from e

        document = self.load_string(self.decode(raw), filename=str(path))
        logger.info(
            f"Loaded {path} ({self.last_encoding}): {len(document.sections)} sections, "
            f"{len(document.properties)} properties"
        )
        return document

    def load_string(self, source: str, filename: str = "<string>") -> IniDocument:
        """
        Load a document from a string.

        Args:
            source: INI text
            filename: Name stored on the document and used in log messages

        Returns:
            Parsed IniDocument
        """
        document = parse(normalize_newlines(source), filename)
        self.last_document = document
        return document


def load(path: str | Path, encoding: str | None = None) -> IniDocument:
    """
    Convenience function to load a document from a file.

    Args:
        path: Path to the INI file
        encoding: Text encoding (detected if None)

    Returns:
        Parsed IniDocument
    """
    return IniLoader(encoding=encoding).load_file(path)
