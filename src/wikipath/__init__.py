"""Wikipath — Wikidot-style path parsing.

Wikidot passes page arguments as extra path segments rather than a query
string. ``/fragment:scp-4447-1/discuss/true`` asks for page ``scp-4447-1``
in category ``fragment`` with argument ``discuss=True``.

Basic usage::

    from wikipath import ArgumentSchema, parse_request, redirect

    schema = ArgumentSchema(
        valid_keys={"edit", "norender"},
        solo_keys={"edit", "norender"},
    )
    request = parse_request("/scp-1000/norender/edit", schema)
    request.slug          # "scp-1000"
    dict(request.arguments)  # {"norender": None, "edit": None}

    redirect("/SCP-1000")  # "/scp-1000"
"""

__version__ = "0.1.0"
__all__ = [
    "EMPTY_REQUEST",
    "Argument",
    "ArgumentSchema",
    "ArgumentValue",
    "CategoryMode",
    "ConfigurationError",
    "Normalizer",
    "PageArguments",
    "ParserConfig",
    "PathParser",
    "PathTokens",
    "Request",
    "WikidotNormalizer",
    "WikipathError",
    "build_request",
    "canonical_path",
    "coerce_value",
    "parse_arguments",
    "parse_options",
    "parse_request",
    "redirect",
    "resolve_arguments",
    "resolve_options",
    "tokenize",
]

# name -> module
_LAZY_IMPORTS: dict[str, str] = {
    "EMPTY_REQUEST": "wikipath.request",
    "Argument": "wikipath.arguments",
    "ArgumentSchema": "wikipath.schema",
    "ArgumentValue": "wikipath.values",
    "CategoryMode": "wikipath.config",
    "ConfigurationError": "wikipath.errors",
    "Normalizer": "wikipath.normalize",
    "PageArguments": "wikipath.arguments",
    "ParserConfig": "wikipath.config",
    "PathParser": "wikipath.parser",
    "PathTokens": "wikipath.tokens",
    "Request": "wikipath.request",
    "WikidotNormalizer": "wikipath.normalize",
    "WikipathError": "wikipath.errors",
    "build_request": "wikipath.request",
    "canonical_path": "wikipath.redirects",
    "coerce_value": "wikipath.values",
    "parse_arguments": "wikipath.arguments",
    "parse_options": "wikipath.arguments",
    "parse_request": "wikipath.request",
    "redirect": "wikipath.redirects",
    "resolve_arguments": "wikipath.arguments",
    "resolve_options": "wikipath.arguments",
    "tokenize": "wikipath.tokens",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wikipath`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module 'wikipath' has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
