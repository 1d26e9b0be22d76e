"""Core module for the Short Iron application."""

from short_iron.core.config import settings
from short_iron.core.locks import ReadWriteLock

__all__ = ["settings", "ReadWriteLock"]
