"""URL registry for the Short Iron application.

This module contains the URLRegistry class which owns the mapping between
long URLs and short codes. The registry is shared by every request handler,
so all access to the mapping goes through a reader/writer lock.
"""

import logging
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import urlsplit, urlunsplit, uses_netloc

from pydantic import AnyUrl, TypeAdapter, ValidationError

from short_iron.core.config import settings
from short_iron.core.locks import ReadWriteLock
from short_iron.services.codes import CodeGenerator
from short_iron.services.exceptions import InvalidURLError, RegistryIntegrityError

logger = logging.getLogger(__name__)

# Aliases for str, for readability of signatures
CanonicalURL = str
ShortCode = str
ShortURL = str

# Schemes whose URLs must name a host ("file" URLs may legitimately omit it)
HOST_REQUIRED_SCHEMES = frozenset(scheme for scheme in uses_netloc if scheme and scheme != "file")

# Characters that may never appear in a host name
FORBIDDEN_HOST_CHARS = frozenset("<>\"\\^|`{}")

_url_adapter = TypeAdapter(AnyUrl)


class URLRegistry:
    """
    In-memory, thread-safe registry of shortened URLs.

    Two indexes are kept in step: long URL -> code for deduplication and
    code -> long URL for redirects. Both are only ever modified together,
    under the write lock, so each URL has exactly one code and each code
    belongs to exactly one URL.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        generator: Optional[Callable[[], ShortCode]] = None,
        max_attempts: Optional[int] = None,
    ):
        """
        Initialize an empty registry.

        Args:
            host: Prefix of the short URLs handed out, defaults to SHORT_URL_HOST
            generator: Callable returning candidate codes, defaults to a CodeGenerator
            max_attempts: Consecutive colliding candidates tolerated before giving up
        """
        self.host = (settings.SHORT_URL_HOST if host is None else host).rstrip("/")
        self._generate = generator if generator is not None else CodeGenerator()
        self.max_attempts = settings.URL_CODE_MAX_ATTEMPTS if max_attempts is None else max_attempts
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")

        self._lock = ReadWriteLock()
        self._codes_by_url: Dict[CanonicalURL, ShortCode] = {}
        self._urls_by_code: Dict[ShortCode, CanonicalURL] = {}

    @staticmethod
    def validate(raw) -> CanonicalURL:
        """
        Parse raw client input as an absolute URL.

        The canonical form is the URL re-assembled from its parsed parts:
        surrounding whitespace is dropped and the scheme is lower-cased.
        No further folding (trailing slashes, query order, default ports)
        is applied.

        Args:
            raw: Value submitted by the client

        Returns:
            str: The canonical URL

        Raises:
            InvalidURLError: If raw is not a syntactically valid absolute URL
        """
        if not isinstance(raw, str):
            raise InvalidURLError(raw, "expected a string")

        candidate = raw.strip()
        if not candidate:
            raise InvalidURLError(raw, "URL is empty")

        # urlsplit silently drops tabs and newlines, so reject them up front
        if any(ch.isspace() or ord(ch) < 32 or ord(ch) == 127 for ch in candidate):
            raise InvalidURLError(raw, "URL contains whitespace or control characters")

        try:
            parts = urlsplit(candidate)
        except ValueError as e:
            raise InvalidURLError(raw, str(e)) from e

        if not parts.scheme:
            raise InvalidURLError(raw, "missing scheme")

        if parts.scheme in HOST_REQUIRED_SCHEMES:
            if not parts.hostname:
                raise InvalidURLError(raw, "missing host")
            if not parts.netloc.startswith("[") and FORBIDDEN_HOST_CHARS.intersection(parts.hostname):
                raise InvalidURLError(raw, "host contains forbidden characters")
        elif not parts.netloc and not parts.path:
            raise InvalidURLError(raw, "nothing follows the scheme")

        try:
            parts.port
        except ValueError as e:
            raise InvalidURLError(raw, "invalid port") from e

        # Full syntax check; the parsed form is not used as the key since it
        # appends a trailing slash to bare hosts
        try:
            _url_adapter.validate_python(candidate)
        except ValidationError as e:
            raise InvalidURLError(raw, e.errors()[0]["msg"]) from e

        return urlunsplit(parts)

    def get_or_create(self, url: CanonicalURL) -> ShortURL:
        """
        Return the short URL for url, registering it on first use.

        The lookup, code generation and insertion happen under one write lock,
        so concurrent calls for the same URL always agree on a single code.

        Args:
            url: A canonical URL as returned by validate()

        Returns:
            str: The short URL, e.g. "short.fe/AbCdEfGhIj"

        Raises:
            RegistryIntegrityError: If no unused code could be generated
        """
        created = False
        collisions = 0
        with self._lock.write_locked():
            code = self._codes_by_url.get(url)
            if code is None:
                code, collisions = self._unused_code()
                self._codes_by_url[url] = code
                self._urls_by_code[code] = url
                created = True

        if collisions:
            logger.warning(f"Discarded {collisions} colliding short code(s) for {url}")
        short_url = self.short_url(code)
        if created:
            logger.info(f"Generated short URL {short_url} for {url}")
        else:
            logger.debug(f"URL {url} already shortened as {short_url}")
        return short_url

    def resolve(self, code: ShortCode) -> Optional[CanonicalURL]:
        """
        Look up the URL registered under code.

        Args:
            code: The bare short code, without host prefix

        Returns:
            The canonical URL, or None if the code was never issued
        """
        with self._lock.read_locked():
            return self._urls_by_code.get(code)

    def snapshot(self) -> Dict[CanonicalURL, ShortURL]:
        """Return an independent copy of the mapping, URL -> short URL."""
        with self._lock.read_locked():
            entries = list(self._codes_by_url.items())
        return {url: self.short_url(code) for url, code in entries}

    def short_url(self, code: ShortCode) -> ShortURL:
        """Render a code as a full short URL."""
        return f"{self.host}/{code}"

    def _unused_code(self) -> Tuple[ShortCode, int]:
        """
        Draw candidates until one is not yet in use.

        Must be called with the write lock held.

        Returns:
            Tuple of the unused code and the number of discarded collisions
        """
        for attempt in range(self.max_attempts):
            candidate = self._generate()
            if candidate not in self._urls_by_code:
                return candidate, attempt
        raise RegistryIntegrityError(
            f"Failed to generate an unused short code after {self.max_attempts} attempts"
        )

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._codes_by_url)

    def __contains__(self, url) -> bool:
        with self._lock.read_locked():
            return url in self._codes_by_url
