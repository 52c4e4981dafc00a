"""Wikipath exception hierarchy.

Parsing and redirect decisions are total over strings and never raise.
Errors only surface while building configuration.
"""


class WikipathError(Exception):
    """Base for all wikipath-specific errors."""


class ConfigurationError(WikipathError):
    """Raised when parser configuration is invalid.

    Typically raised while constructing ``ParserConfig``.
    """
