"""html2md configuration models."""

from .config import DEFAULT_SKIP_TAGS, ConverterConfig

__all__ = [
    "DEFAULT_SKIP_TAGS",
    "ConverterConfig",
]
