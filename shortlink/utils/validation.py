import re
from typing import Any, Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from shortlink.core.exceptions import InvalidSlugError, InvalidURLFormatError, URLRequiredError

_absolute_url = TypeAdapter(AnyUrl)

# C0 control characters and space, trimmed from both ends by URL parsers
_C0_CONTROL_OR_SPACE = "".join(chr(code) for code in range(0x21))

# Characters that would split or end the path segment a slug is served from
_PATH_UNSAFE = re.compile(r"[/?#%\\\x00-\x20\x7f]")

# Paths served by the application itself; a slug equal to one is never reachable
RESERVED_SLUGS = frozenset({"health", "ready", "docs", "redoc", "openapi.json", "api"})


def validate_target_url(url: Any) -> str:
    """Return ``url`` if it is a non-empty absolute URL.

    Leading and trailing control characters and spaces are dropped, as the
    URL parser ignores them; the rest of the caller's string is stored as
    submitted rather than in pydantic's normalised form.
    """
    if not url:
        raise URLRequiredError()
    if not isinstance(url, str):
        raise InvalidURLFormatError()
    url = url.strip(_C0_CONTROL_OR_SPACE)
    try:
        _absolute_url.validate_python(url)
    except ValidationError:
        raise InvalidURLFormatError()
    return url


def validate_custom_slug(slug: Optional[str]) -> Optional[str]:
    if slug and (slug in (".", "..") or _PATH_UNSAFE.search(slug)):
        raise InvalidSlugError()
    return slug


def is_reserved_slug(slug: str) -> bool:
    return slug in RESERVED_SLUGS
