import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    ENCODING = os.getenv("READTEXT_ENCODING", "utf-8")
    # Codec error handler: strict raises DecodeError, replace/ignore are best-effort
    DECODE_ERRORS = os.getenv("READTEXT_DECODE_ERRORS", "strict").lower()
    LOG_LEVEL = os.getenv("READTEXT_LOG_LEVEL", "WARNING").upper()

    # Observability
    LANGFUSE_PUBLIC_KEY = os.getenv("LANGFUSE_PUBLIC_KEY")
    LANGFUSE_SECRET_KEY = os.getenv("LANGFUSE_SECRET_KEY")
    LANGFUSE_HOST = os.getenv("LANGFUSE_HOST", "https://cloud.langfuse.com")

    # Set default service name for OTel/Langfuse
    os.environ.setdefault("OTEL_SERVICE_NAME", "readtext")
