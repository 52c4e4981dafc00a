"""PathParser — a schema and configuration bound together.

Convenient when a router parses every incoming path the same way::

    parser = PathParser(
        ArgumentSchema(
            valid_keys={"edit", "norender", "noredirect", "offset"},
            solo_keys={"edit", "norender", "noredirect"},
        ),
    )
    request = parser.parse("/scp-1000/norender/edit")
"""

from wikipath.arguments import PageArguments, parse_arguments, parse_options
from wikipath.config import DEFAULT_CONFIG, ParserConfig
from wikipath.normalize import DEFAULT_NORMALIZER, Normalizer
from wikipath.redirects import redirect
from wikipath.request import Request, parse_request
from wikipath.schema import ArgumentSchema


class PathParser:
    """Parses paths with a fixed schema, configuration and normalizer.

    Holds no per-call state, so one instance can be shared freely.
    Without a schema, arguments are parsed schema-less.
    """

    __slots__ = ("config", "normalizer", "schema")

    def __init__(
        self,
        schema: ArgumentSchema | None = None,
        config: ParserConfig | None = None,
        normalizer: Normalizer | None = None,
    ) -> None:
        self.schema = schema
        self.config = config or DEFAULT_CONFIG
        self.normalizer = normalizer or DEFAULT_NORMALIZER

    def __repr__(self) -> str:
        return f"PathParser(schema={self.schema!r}, config={self.config!r})"

    def parse(self, path: str) -> Request:
        """Parse a full path into a ``Request``."""
        return parse_request(path, self.schema, config=self.config)

    def parse_arguments(self, path: str) -> PageArguments:
        """Parse just an argument tail, such as ``/norender/edit/true``."""
        if self.schema is None:
            return parse_options(path)
        return parse_arguments(path, self.schema)

    def redirect(self, path: str) -> str | None:
        """Return the canonical path to redirect to, or ``None``."""
        return redirect(path, normalizer=self.normalizer, config=self.config)
