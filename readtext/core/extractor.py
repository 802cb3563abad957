import logging

from readtext.core.errors import InvalidArgument
from readtext.core.interfaces import IExtractor, IReader, Mode, Request, Result, Unit

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"

class TextExtractor(IExtractor):
    def __init__(self, reader: IReader):
        self.reader = reader

    def extract(self, request: Request) -> Result:
        if request.count < 0:
            raise InvalidArgument(f"Count must be non-negative, got {request.count}")

        if request.unit == Unit.LINES:
            lines = self.reader.read_lines(request.filename)
            body = LINE_SEPARATOR.join(self._take(lines, request.mode, request.count))
        else:
            data = self.reader.read_bytes(request.filename)
            body = self.reader.decode(request.filename, self._take(data, request.mode, request.count))

        logger.debug(f"Extracted {len(body)} chars from {request.filename} ({request.mode.value})")
        return Result(summary=self.summary(request), body=body)

    @staticmethod
    def summary(request: Request) -> str:
        if request.quiet:
            return ""
        text = f"Reading {request.count} {request.unit.value} from {request.mode.value}"
        if request.mode == Mode.FROM_BOTTOM:
            text += ":"
        return text

    @staticmethod
    def _take(items, mode: Mode, count: int):
        # items[-0:] would be everything, so the bottom slice starts from an index
        if mode == Mode.FROM_TOP:
            return items[:count]
        return items[max(len(items) - count, 0):]
