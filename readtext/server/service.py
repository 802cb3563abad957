import logging
from typing import TextIO

from readtext.core.interfaces import IExtractor, Request, Result
from readtext.utils.observability import Observability

logger = logging.getLogger(__name__)

class ReadTextService:
    def __init__(self, extractor: IExtractor):
        self.extractor = extractor

    def run(self, request: Request, sink: TextIO) -> Result:
        """
        Extracts the requested slice and writes it to sink.
        The summary line is only written when non-empty; the body line always is.
        Nothing is written if extraction fails.
        """
        result = self.extractor.extract(request)

        if result.summary:
            sink.write(result.summary + "\n")
        sink.write(result.body + "\n")
        sink.flush()

        Observability.track_extract(request, result)
        return result
