"""Immutable page request.

The parse result for a full path: which page, in which categories, with
which arguments. Built once from the input and never changed.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from wikipath.arguments import PageArguments, resolve_arguments, resolve_options
from wikipath.config import DEFAULT_CONFIG, ParserConfig
from wikipath.schema import ArgumentSchema
from wikipath.tokens import PathTokens, tokenize

logger = logging.getLogger("wikipath.parse")


@dataclass(frozen=True, slots=True)
class Request:
    """A parsed request for a page.

    ``/fragment:scp-4447-1/discuss/true`` becomes::

        Request(
            slug="scp-4447-1",
            categories=("fragment",),
            arguments=PageArguments.from_pairs([("discuss", True, "true")]),
        )
    """

    slug: str
    categories: tuple[str, ...] = ()
    arguments: PageArguments = field(default_factory=PageArguments)

    @property
    def category(self) -> str | None:
        """The innermost category, or ``None`` if the page has none."""
        if self.categories:
            return self.categories[-1]
        return None

    @property
    def is_empty(self) -> bool:
        """True for the request parsed from an empty path."""
        return not self.slug and not self.categories and not self.arguments

    def to_dict(self) -> dict[str, Any]:
        """Plain data for serialization. Values are natural scalars or ``None``."""
        return {
            "slug": self.slug,
            "categories": list(self.categories),
            "arguments": self.arguments.to_dict(),
        }

    def to_json(self, **kwargs: Any) -> str:
        """Serialize to JSON. Keyword arguments go to ``json.dumps``."""
        return json.dumps(self.to_dict(), **kwargs)


EMPTY_REQUEST = Request(slug="")


def build_request(tokens: PathTokens, arguments: PageArguments) -> Request:
    """Assemble a ``Request`` from tokenized path pieces and resolved arguments."""
    if tokens.is_empty and not arguments:
        return EMPTY_REQUEST
    return Request(slug=tokens.slug, categories=tokens.categories, arguments=arguments)


def parse_request(
    path: str,
    schema: ArgumentSchema | None = None,
    *,
    config: ParserConfig | None = None,
) -> Request:
    """Parse a full path into a ``Request``.

    With a *schema*, arguments are resolved with solo-key support.
    Without one, every key takes the following segment as its value.

    Never raises: malformed input degrades to ``None`` or string values.

    Examples::

        >>> parse_request("/aaa:bbb:page").categories
        ('aaa', 'bbb')
        >>> parse_request("page/a/1/a/2").arguments["a"]
        2
    """
    config = config or DEFAULT_CONFIG
    tokens = tokenize(path, config.category_mode)
    if tokens.is_empty:
        return EMPTY_REQUEST

    if schema is None:
        arguments = resolve_options(tokens.segments)
    else:
        arguments = resolve_arguments(tokens.segments, schema)

    request = build_request(tokens, arguments)
    logger.debug(
        "Parsed %r -> slug=%r categories=%r arguments=%d",
        path,
        request.slug,
        request.categories,
        len(request.arguments),
    )
    return request
