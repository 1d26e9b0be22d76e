"""Service layer for the Short Iron application.

This package contains the URL registry and the short code generator it draws from.
"""

from short_iron.services.codes import CodeGenerator
from short_iron.services.registry import URLRegistry

__all__ = ["CodeGenerator", "URLRegistry"]
