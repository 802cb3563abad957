from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field, ValidationError

from readtext.core.errors import InvalidArgument

# Domain Models (DTOs)
class Mode(str, Enum):
    FROM_TOP = "top"
    FROM_BOTTOM = "bottom"

class Unit(str, Enum):
    LINES = "lines"
    BYTES = "bytes"

class Request(BaseModel):
    filename: str
    mode: Mode
    unit: Unit
    count: int = Field(ge=0)
    quiet: bool = False

    @classmethod
    def from_options(
        cls,
        filename: str,
        mode: Mode,
        lines: Optional[int] = None,
        bytes_: Optional[int] = None,
        quiet: bool = False
    ) -> "Request":
        """
        Resolves raw --lines/--bytes options into a single unit and count.
        Exactly one of them must be given.
        """
        if lines is not None and bytes_ is not None:
            raise InvalidArgument("Only one of --lines or --bytes may be given")
        if lines is None and bytes_ is None:
            raise InvalidArgument("One of --lines or --bytes is required")

        unit, count = (Unit.LINES, lines) if lines is not None else (Unit.BYTES, bytes_)
        try:
            return cls(filename=filename, mode=mode, unit=unit, count=count, quiet=quiet)
        except ValidationError as e:
            error = e.errors()[0]
            raise InvalidArgument(f"Invalid {unit.value} count {count}: {error['msg']}") from e

class Result(BaseModel):
    summary: str = ""
    body: str

# Interfaces
class IReader(ABC):
    @abstractmethod
    def read_lines(self, path: str) -> List[str]:
        """Reads the whole file and splits it into lines."""
        pass

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Reads the whole file as raw bytes."""
        pass

    @abstractmethod
    def decode(self, path: str, data: bytes) -> str:
        """Decodes a byte range read from path."""
        pass

class IExtractor(ABC):
    @abstractmethod
    def extract(self, request: Request) -> Result:
        """Produces the summary line and the requested slice of the file."""
        pass
