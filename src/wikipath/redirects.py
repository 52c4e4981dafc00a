"""Redirect decisions for non-canonical paths.

Lets a web router send requests for ``/SCP-1000`` or ``/_default:page``
to ``/scp-1000`` and ``/page``::

    target = redirect(request.path)
    if target is not None:
        return Redirect(target)
"""

import logging

from wikipath.config import DEFAULT_CONFIG, ParserConfig
from wikipath.normalize import DEFAULT_NORMALIZER, Normalizer

logger = logging.getLogger("wikipath.redirect")


def strip_default_category(path: str, default_category: str = "_default") -> str:
    """Drop the implicit default category from the front of *path*.

    ``_default:page`` -> ``page``, ``/_default:page`` -> ``/page``.
    """
    prefix = f"{default_category.lower()}:"
    slash = "/" if path.startswith("/") else ""
    rest = path[len(slash) :]
    while rest.startswith(prefix):
        rest = rest[len(prefix) :]
    return slash + rest


def canonical_path(
    path: str,
    *,
    normalizer: Normalizer | None = None,
    config: ParserConfig | None = None,
) -> str:
    """Return the canonical form of *path*: decoded, normalized, no default category."""
    normalizer = normalizer or DEFAULT_NORMALIZER
    config = config or DEFAULT_CONFIG
    normalized = normalizer.normalize(normalizer.decode(path))
    return strip_default_category(normalized, config.default_category)


def redirect(
    path: str,
    *,
    normalizer: Normalizer | None = None,
    config: ParserConfig | None = None,
) -> str | None:
    """Return the path to redirect to, or ``None`` if *path* is already canonical.

    A leading ``/`` is kept as given. Applying ``redirect`` to its own
    result always returns ``None``.

    Examples::

        >>> redirect("/SCP-1000")
        '/scp-1000'
        >>> redirect("/scp-1000") is None
        True
    """
    logger.debug("Checking path %r for redirection", path)
    target = canonical_path(path, normalizer=normalizer, config=config)
    if target == path:
        return None

    logger.debug("Redirecting %r -> %r", path, target)
    return target
