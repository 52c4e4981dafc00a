"""Path normalization — the canonical form of a Wikidot page path.

The redirect advisor only decides *whether* a path differs from its
canonical form. What canonical means is delegated to a ``Normalizer``.

``WikidotNormalizer`` follows Wikidot's page naming rules::

    "Big Cheese Horace"   -> "big-cheese-horace"
    "Tufto's Proposal"    -> "tufto-s-proposal"
    "/SCP-1000"           -> "/scp-1000"
    "Component: Image"    -> "component:image"
"""

import re
from typing import Protocol, runtime_checkable
from urllib.parse import unquote


@runtime_checkable
class Normalizer(Protocol):
    """Anything that can decode and normalize page paths.

    ``normalize`` must be idempotent: a normalized path is normal.
    """

    def decode(self, path: str) -> str: ...
    def normalize(self, path: str) -> str: ...
    def is_normal(self, path: str) -> bool: ...


# Runs of characters not allowed in a page path
_NON_URL = re.compile(r"[^\w\-:/]+")
# Underscores are only kept at the start of a path component
_INNER_UNDERSCORE = re.compile(r"(?<=[^/:])_")
_MULTIPLE_SLASHES = re.compile(r"/{2,}")
_MULTIPLE_DASHES = re.compile(r"-{2,}")
_MULTIPLE_COLONS = re.compile(r":{2,}")
_DASH_AROUND_SEPARATOR = re.compile(r"-*([:/])-*")
_COLON_AT_EDGE = re.compile(r"(^|/):+|:+(?=/|$)")
_EDGE_DASHES = re.compile(r"^-+|-+$")


class WikidotNormalizer:
    """Default ``Normalizer`` using Wikidot's page naming rules.

    A leading ``/`` is preserved. Trailing slashes are dropped unless the
    path is only ``/``.
    """

    __slots__ = ()

    def decode(self, path: str) -> str:
        """Percent-decode *path*."""
        return unquote(path)

    def normalize(self, path: str) -> str:
        """Return the canonical form of *path*."""
        text = path.strip().lower()
        text = _NON_URL.sub("-", text)
        text = _INNER_UNDERSCORE.sub("-", text)
        text = _MULTIPLE_DASHES.sub("-", text)
        text = _DASH_AROUND_SEPARATOR.sub(r"\1", text)
        text = _MULTIPLE_COLONS.sub(":", text)
        # Dropping a colon can leave "//" behind
        text = _COLON_AT_EDGE.sub(r"\1", text)
        text = _MULTIPLE_SLASHES.sub("/", text)
        text = _EDGE_DASHES.sub("", text)
        if len(text) > 1:
            text = text.rstrip("/") or "/"
        return text

    def is_normal(self, path: str) -> bool:
        """True if *path* is already in canonical form."""
        return self.normalize(path) == path


DEFAULT_NORMALIZER = WikidotNormalizer()
