"""Short Iron: an in-memory URL shortener.

``POST /shorten`` hands out ``short.fe/<code>`` aliases, ``GET /<code>``
redirects back, and ``GET /misc/debug`` lists every known mapping.
"""

__version__ = "0.1.0"
