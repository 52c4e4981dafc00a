"""Path tokenizer.

Splits a Wikidot-style path into its page name and the flat run of
argument segments that follow it::

    "/fragment:scp-4447-1/discuss/true"
        -> categories ("fragment",), slug "scp-4447-1",
           segments ("discuss", "true")
"""

import logging
from dataclasses import dataclass

from wikipath.config import CategoryMode

logger = logging.getLogger("wikipath.parse")


@dataclass(frozen=True, slots=True)
class PathTokens:
    """A tokenized path: page name pieces plus raw argument segments."""

    slug: str
    categories: tuple[str, ...]
    segments: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        """True for the empty path (``""`` or ``"/"``)."""
        return not self.slug and not self.categories and not self.segments


EMPTY_TOKENS = PathTokens(slug="", categories=(), segments=())


def strip_leading_slash(path: str) -> str:
    """Remove at most one leading ``/``."""
    if path.startswith("/"):
        return path[1:]
    return path


def split_segments(path: str) -> list[str]:
    """Split *path* on ``/`` after dropping one leading slash.

    Empty segments are kept; the caller decides what they mean.
    The empty path yields no segments.
    """
    path = strip_leading_slash(path)
    if not path:
        return []
    return path.split("/")


def split_categories(
    name: str,
    mode: CategoryMode = CategoryMode.CHAIN,
) -> tuple[tuple[str, ...], str]:
    """Split a page name into ``(categories, slug)``.

    ``CHAIN`` keeps every colon-separated prefix, outermost first.
    ``NEAREST`` splits at the first colon only and leaves the rest in the slug.
    """
    if mode is CategoryMode.NEAREST:
        category, sep, slug = name.partition(":")
        if not sep:
            return (), name
        return (category,), slug

    *categories, slug = name.split(":")
    return tuple(categories), slug


def tokenize(path: str, mode: CategoryMode = CategoryMode.CHAIN) -> PathTokens:
    """Tokenize a full request path.

    The first segment names the page; everything after it is argument
    segments. Never raises.
    """
    parts = split_segments(path)
    if not parts:
        logger.debug("Empty path, returning empty tokens")
        return EMPTY_TOKENS

    categories, slug = split_categories(parts[0], mode)
    return PathTokens(slug=slug, categories=categories, segments=tuple(parts[1:]))
