class ReadTextError(Exception):
    """Base class for errors raised by readtext itself."""


class InvalidArgument(ReadTextError, ValueError):
    """Both or neither of lines/bytes were given, or the count is negative."""


class DecodeError(ReadTextError, ValueError):
    """The selected content is not valid text in the configured encoding."""

    def __init__(self, path: str, encoding: str, reason: str):
        self.path = path
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"Cannot decode {path} as {encoding}: {reason}")
