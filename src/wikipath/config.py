"""Parser configuration.

ParserConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass
from enum import Enum

from wikipath.errors import ConfigurationError


class CategoryMode(Enum):
    """How the colon-separated prefix of a page name is split."""

    # "aaa:bbb:page" -> categories ["aaa", "bbb"], slug "page"
    CHAIN = "chain"
    # "aaa:bbb:page" -> categories ["aaa"], slug "bbb:page"
    NEAREST = "nearest"


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Parser configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ParserConfig(category_mode="nearest")
    """

    category_mode: CategoryMode = CategoryMode.CHAIN

    # Implicit category, stripped from canonical paths on redirect
    default_category: str = "_default"

    def __post_init__(self) -> None:
        mode = self.category_mode
        if not isinstance(mode, CategoryMode):
            try:
                mode = CategoryMode(mode)
            except ValueError:
                allowed = ", ".join(repr(m.value) for m in CategoryMode)
                msg = f"Unknown category mode {self.category_mode!r}. Expected one of: {allowed}."
                raise ConfigurationError(msg) from None
            object.__setattr__(self, "category_mode", mode)

        if not self.default_category:
            msg = "default_category must be a non-empty string."
            raise ConfigurationError(msg)
        if ":" in self.default_category or "/" in self.default_category:
            msg = f"default_category {self.default_category!r} must not contain ':' or '/'."
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ParserConfig()
