from readtext.config import Config
from readtext.core.extractor import TextExtractor
from readtext.core.reader import FileReader
from readtext.server.service import ReadTextService

class Context:
    _service_instance = None

    @classmethod
    def get_service(cls) -> ReadTextService:
        if cls._service_instance is None:
            # Initialize Dependencies
            reader = FileReader(encoding=Config.ENCODING, errors=Config.DECODE_ERRORS)
            extractor = TextExtractor(reader)

            # Inject
            cls._service_instance = ReadTextService(extractor=extractor)
        return cls._service_instance

    @classmethod
    def reset(cls):
        cls._service_instance = None
