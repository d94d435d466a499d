"""Locale lookup for gold segment grouping.

Accepts BCP-47 ("en-US") or POSIX ("en_US") codes and caches parsed
Babel locales.

Python 3.13+.
"""

from __future__ import annotations

import functools

from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Rewrite a BCP-47 code with the underscore separator Babel parses.

    Example:
        >>> normalize_locale("de-DE")
        'de_DE'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Resolve a locale code to a cached babel.Locale.

    "en-US" and "en_US" are distinct cache keys that resolve to equal
    locales.

    Raises:
        babel.core.UnknownLocaleError: No locale data for the code
        ValueError: The code is not a parseable locale identifier
    """
    return Locale.parse(normalize_locale(locale_code))
