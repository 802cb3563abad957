import logging
from pathlib import Path
from typing import List

from readtext.core.errors import DecodeError
from readtext.core.interfaces import IReader

logger = logging.getLogger(__name__)

BOM = "\ufeff"

class FileReader(IReader):
    """
    Loads a whole file into memory in a single blocking read.
    OSErrors (missing file, permission denied, directory) propagate unchanged.
    """

    def __init__(self, encoding: str = "utf-8", errors: str = "strict"):
        self.encoding = encoding
        self.errors = errors

    def read_bytes(self, path: str) -> bytes:
        data = Path(path).read_bytes()
        logger.debug(f"Read {len(data)} bytes from {path}")
        return data

    def decode(self, path: str, data: bytes) -> str:
        try:
            return data.decode(self.encoding, errors=self.errors)
        except UnicodeDecodeError as e:
            raise DecodeError(path, self.encoding, e.reason) from e

    def read_lines(self, path: str) -> List[str]:
        """
        Splits on \\n, \\r\\n and \\r alike.
        A trailing line break does not produce an empty last line.
        A leading byte order mark is dropped; read_bytes keeps it.
        """
        text = self.decode(path, self.read_bytes(path))
        if text.startswith(BOM):
            text = text[len(BOM):]
        if not text:
            return []

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        lines = text.split("\n")
        if text.endswith("\n"):
            lines.pop()
        return lines
