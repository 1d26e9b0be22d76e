"""Test utilities for Short Iron tests."""

import random
import string
import threading
from typing import Iterable


def random_string(length: int = 10) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choice(string.ascii_letters + string.digits) for _ in range(length))


def random_url() -> str:
    """Generate a random URL for testing."""
    domain = f"{random_string(8).lower()}.com"
    path = random_string(12)
    return f"https://{domain}/{path}"


class ScriptedGenerator:
    """Code generator that hands out a fixed sequence of codes.

    Records how many codes were drawn so tests can assert on retries.
    """

    def __init__(self, codes: Iterable[str]):
        self._codes = iter(codes)
        self._lock = threading.Lock()
        self.calls = 0

    def __call__(self) -> str:
        with self._lock:
            self.calls += 1
            return next(self._codes)
