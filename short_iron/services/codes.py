"""Short code generation.

Codes are drawn from the operating system CSPRNG so that they cannot be
predicted from previously issued ones.
"""

import secrets
from typing import Optional

from short_iron.core.config import settings


class CodeGenerator:
    """
    Produces random short codes of a fixed length.

    The generator holds no state besides its configuration and may be shared
    freely between threads.
    """

    def __init__(self, length: Optional[int] = None, alphabet: Optional[str] = None):
        """
        Initialize the generator.

        Args:
            length: Number of characters per code, defaults to URL_CODE_LENGTH
            alphabet: Characters to draw from, defaults to URL_CODE_CHARS

        Raises:
            ValueError: If length is below 1 or the alphabet has fewer than two
                distinct characters
        """
        self.length = settings.URL_CODE_LENGTH if length is None else length
        self.alphabet = settings.URL_CODE_CHARS if alphabet is None else alphabet

        if self.length < 1:
            raise ValueError(f"Code length must be at least 1, got {self.length}")
        if len(set(self.alphabet)) < 2:
            raise ValueError("Code alphabet needs at least two distinct characters")

    def generate(self) -> str:
        """Return a fresh random code."""
        return ''.join(secrets.choice(self.alphabet) for _ in range(self.length))

    __call__ = generate

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length}, alphabet={self.alphabet!r})"
