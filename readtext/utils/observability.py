import logging
from contextlib import nullcontext
from langfuse import Langfuse
from readtext.config import Config
from readtext.core.interfaces import Request, Result

logger = logging.getLogger(__name__)

class Observability:
    """
    Optional Langfuse tracing for extractions.
    Without LANGFUSE_PUBLIC_KEY everything here only logs.
    """
    _langfuse = None

    @classmethod
    def get_client(cls):
        if not cls._langfuse and Config.LANGFUSE_PUBLIC_KEY:
            try:
                cls._langfuse = Langfuse(
                    public_key=Config.LANGFUSE_PUBLIC_KEY,
                    secret_key=Config.LANGFUSE_SECRET_KEY,
                    host=Config.LANGFUSE_HOST
                )
            except Exception as e:
                logger.warning(f"Failed to initialize Langfuse: {e}")
        return cls._langfuse

    @staticmethod
    def request_metadata(request: Request, result: Result = None) -> dict:
        metadata = {
            "filename": request.filename,
            "mode": request.mode.value,
            "unit": request.unit.value,
            "count": request.count,
            "quiet": request.quiet,
        }
        if result is not None:
            metadata["body_chars"] = len(result.body)
        return metadata

    @staticmethod
    def track_extract(request: Request, result: Result):
        Observability.track_event("Extract", Observability.request_metadata(request, result))

    @staticmethod
    def track_event(name: str, metadata: dict = None):
        logger.info(f"EVENT: {name} | {metadata}")
        client = Observability.get_client()
        if client:
            try:
                client.create_event(name=name, metadata=metadata)
            except Exception as e:
                logger.warning(f"Langfuse error: {e}")

    @staticmethod
    def flush():
        client = Observability.get_client()
        if client:
            try:
                client.flush()
            except Exception as e:
                logger.warning(f"Langfuse flush error: {e}")

    @staticmethod
    def trace_request(command: str, request: Request):
        """Span around one head/tail run, a no-op without Langfuse"""
        client = Observability.get_client()
        if client:
            return client.start_as_current_span(
                name=f"readtext {command}",
                metadata=Observability.request_metadata(request)
            )
        return nullcontext()
