# Test fixtures
from .sample_documents import (
    SAMPLE_INDEX_GMI,
    SAMPLE_INDEX_HTML,
    SAMPLE_LITERAL_GMI,
    SAMPLE_PLAIN_GMI,
    SAMPLE_PNG_BYTES,
    build_capsule,
)

__all__ = [
    "SAMPLE_INDEX_GMI",
    "SAMPLE_INDEX_HTML",
    "SAMPLE_LITERAL_GMI",
    "SAMPLE_PLAIN_GMI",
    "SAMPLE_PNG_BYTES",
    "build_capsule",
]
