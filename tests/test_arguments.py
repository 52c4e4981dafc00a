"""Tests for wikipath.arguments — schema-driven and schema-less resolution."""

import pytest

from wikipath.arguments import (
    Argument,
    PageArguments,
    parse_arguments,
    parse_options,
    resolve_arguments,
    resolve_options,
)
from wikipath.schema import ArgumentSchema
from wikipath.values import value_kind

FLAGS = ArgumentSchema(valid_keys={"edit", "norender"}, solo_keys={"edit", "norender"})

PAGE_SCHEMA = ArgumentSchema(
    valid_keys={"edit", "norender", "noredirect", "offset", "title", "tags"},
    solo_keys={"edit", "norender", "noredirect"},
)


def kinds(args: PageArguments) -> dict[str, str]:
    return {key: value_kind(value) for key, value in args.items()}


class TestSoloKeys:
    def test_two_flags(self) -> None:
        args = resolve_arguments(["norender", "edit"], FLAGS)
        assert dict(args) == {"norender": None, "edit": None}

    def test_flag_then_explicit_value(self) -> None:
        args = resolve_arguments(["norender", "edit", "true"], FLAGS)
        assert dict(args) == {"norender": None, "edit": True}
        assert kinds(args) == {"norender": "null", "edit": "boolean"}

    def test_run_of_flags(self) -> None:
        args = resolve_arguments(["norender", "noredirect", "edit"], PAGE_SCHEMA)
        assert dict(args) == {"norender": None, "noredirect": None, "edit": None}

    def test_raw_holds_lookahead(self) -> None:
        args = resolve_arguments(["norender", "edit"], FLAGS)
        assert args.get_raw("norender") == "edit"
        assert args.get_raw("edit") == ""

    def test_solo_key_with_explicit_value(self) -> None:
        args = resolve_arguments(["norender", "true", "edit", "false"], FLAGS)
        assert dict(args) == {"norender": True, "edit": False}
        assert args["norender"] is True
        assert args["edit"] is False

    def test_solo_key_at_end(self) -> None:
        args = resolve_arguments(["offset", "2", "edit"], PAGE_SCHEMA)
        assert dict(args) == {"offset": 2, "edit": None}
        assert kinds(args) == {"offset": "integer", "edit": "null"}
        assert args.get_raw("edit") == ""

    def test_non_solo_key_swallows_next_key(self) -> None:
        args = resolve_arguments(["offset", "edit"], PAGE_SCHEMA)
        assert dict(args) == {"offset": "edit"}

    def test_solo_key_followed_by_unknown_segment(self) -> None:
        args = resolve_arguments(["edit", "something"], PAGE_SCHEMA)
        assert dict(args) == {"edit": "something"}

    def test_flag_before_valued_key(self) -> None:
        args = resolve_arguments(["norender", "offset", "3", "title", "Hello"], PAGE_SCHEMA)
        assert dict(args) == {"norender": None, "offset": 3, "title": "Hello"}

    def test_lookahead_case_insensitive(self) -> None:
        args = resolve_arguments(["NoRender", "EDIT"], FLAGS)
        assert args["norender"] is None
        assert args["edit"] is None

    def test_long_run_does_not_recurse(self) -> None:
        segments = ["edit", "norender"] * 5000
        args = resolve_arguments(segments, FLAGS)
        assert dict(args) == {"edit": None, "norender": None}


class TestResolveArguments:
    def test_key_value_pairs(self) -> None:
        args = resolve_arguments(["offset", "2", "title", "Page"], PAGE_SCHEMA)
        assert dict(args) == {"offset": 2, "title": "Page"}
        assert args.get_raw("offset") == "2"

    def test_last_occurrence_wins(self) -> None:
        args = resolve_arguments(["a", "1", "a", "2"], PAGE_SCHEMA)
        assert args["a"] == 2

    def test_unknown_keys_recorded(self) -> None:
        args = resolve_arguments(["unknown", "x"], PAGE_SCHEMA)
        assert args["unknown"] == "x"

    def test_empty_key_segments_skipped(self) -> None:
        args = resolve_arguments(["", "offset", "2", ""], PAGE_SCHEMA)
        assert dict(args) == {"offset": 2}

    def test_missing_value_is_null(self) -> None:
        args = resolve_arguments(["title"], PAGE_SCHEMA)
        assert args["title"] is None
        assert args.get_raw("title") == ""

    def test_empty_value_is_null(self) -> None:
        args = resolve_arguments(["title", "", "offset", "1"], PAGE_SCHEMA)
        assert dict(args) == {"title": None, "offset": 1}
        assert kinds(args) == {"title": "null", "offset": "integer"}

    def test_no_segments(self) -> None:
        assert len(resolve_arguments([], PAGE_SCHEMA)) == 0

    def test_empty_schema(self) -> None:
        args = resolve_arguments(["edit", "norender"], ArgumentSchema())
        assert dict(args) == {"edit": "norender"}


class TestResolveOptions:
    def test_pairs(self) -> None:
        args = resolve_options(["noredirect", "true", "offset", "5"])
        assert dict(args) == {"noredirect": True, "offset": 5}
        assert kinds(args) == {"noredirect": "boolean", "offset": "integer"}

    def test_orphaned_literals_skipped(self) -> None:
        args = resolve_options(["true", "edit", "1", "false"])
        assert dict(args) == {"edit": 1}
        assert kinds(args) == {"edit": "integer"}

    def test_literal_skip_is_case_sensitive(self) -> None:
        args = resolve_options(["TRUE", "x"])
        assert dict(args) == {"TRUE": "x"}

    def test_no_solo_lookahead(self) -> None:
        args = resolve_options(["norender", "edit"])
        assert dict(args) == {"norender": "edit"}

    def test_trailing_key(self) -> None:
        args = resolve_options(["a", "1", "b"])
        assert dict(args) == {"a": 1, "b": None}
        assert kinds(args) == {"a": "integer", "b": "null"}
        assert args.get_raw("b") == ""

    def test_empty_segments_skipped(self) -> None:
        args = resolve_options(["", "", "a", "x"])
        assert dict(args) == {"a": "x"}

    def test_last_occurrence_wins(self) -> None:
        args = resolve_options(["a", "1", "a", "2"])
        assert args["a"] == 2


class TestParseHelpers:
    def test_parse_arguments_leading_slash_optional(self) -> None:
        assert parse_arguments("/norender/edit", FLAGS) == parse_arguments("norender/edit", FLAGS)

    def test_parse_arguments(self) -> None:
        args = parse_arguments("/norender/edit/true", FLAGS)
        assert dict(args) == {"norender": None, "edit": True}
        assert kinds(args) == {"norender": "null", "edit": "boolean"}

    def test_parse_options(self) -> None:
        args = parse_options("/noredirect/true/norender/true")
        assert dict(args) == {"noredirect": True, "norender": True}
        assert kinds(args) == {"noredirect": "boolean", "norender": "boolean"}

    def test_parse_empty(self) -> None:
        assert len(parse_options("")) == 0
        assert len(parse_arguments("/", FLAGS)) == 0


class TestPageArguments:
    def test_case_insensitive_lookup(self) -> None:
        args = parse_options("/NoRedirect/true")
        assert args["noredirect"] is True
        assert args["NOREDIRECT"] is True
        assert "noREDIRECT" in args

    def test_preserves_first_spelling(self) -> None:
        args = parse_options("/Edit/1/EDIT/2")
        assert list(args) == ["Edit"]
        assert args["edit"] == 2
        assert args.get_raw("edit") == "2"

    def test_missing_key_raises(self) -> None:
        args = parse_options("/a/1")
        with pytest.raises(KeyError):
            args["b"]

    def test_contains_non_string(self) -> None:
        args = parse_options("/a/1")
        assert 1 not in args

    def test_get(self) -> None:
        args = parse_options("/a/1")
        assert args.get("a") == 1
        assert args.get("b") is None
        assert args.get("b", "fallback") == "fallback"

    def test_get_argument(self) -> None:
        args = parse_options("/a/1")
        assert args.get_argument("A") == Argument(key="a", value=1, raw="1")
        assert args.get_argument("b") is None

    def test_get_raw_default(self) -> None:
        args = parse_options("/a/1")
        assert args.get_raw("b") is None
        assert args.get_raw("b", "") == ""

    def test_is_set(self) -> None:
        args = parse_arguments("/edit", FLAGS)
        assert args.is_set("edit")
        assert not args.is_set("norender")

    def test_get_int(self) -> None:
        args = parse_options("/offset/3/title/abc/flag/true")
        assert args.get_int("offset") == 3
        assert args.get_int("title") is None
        assert args.get_int("flag") is None
        assert args.get_int("missing", 10) == 10

    def test_get_bool(self) -> None:
        args = parse_options("/a/true/b/false/c/1/d/0/e/yes/f/nope/g")
        assert args.get_bool("a") is True
        assert args.get_bool("b") is False
        assert args.get_bool("c") is True
        assert args.get_bool("d") is False
        assert args.get_bool("e") is True
        assert args.get_bool("f") is False
        assert args.get_bool("g") is True
        assert args.get_bool("missing") is None
        assert args.get_bool("missing", False) is False

    def test_to_dict(self) -> None:
        args = parse_arguments("/norender/edit/true", FLAGS)
        assert args.to_dict() == {"norender": None, "edit": True}
        assert args.to_dict()["edit"] is True

    def test_equality(self) -> None:
        assert parse_options("/a/1") == parse_options("/A/1")
        assert parse_options("/a/1") != parse_options("/a/2")
        assert parse_options("/a/1") == {"a": 1}

    def test_equality_includes_raw(self) -> None:
        solo = parse_arguments("/norender/edit", FLAGS)
        explicit = PageArguments.from_pairs([("norender", None, ""), ("edit", None, "")])
        assert solo != explicit

    def test_from_pairs_last_wins(self) -> None:
        args = PageArguments.from_pairs([("a", 1, "1"), ("A", 2, "2")])
        assert dict(args) == {"a": 2}

    def test_empty(self) -> None:
        args = PageArguments()
        assert len(args) == 0
        assert list(args) == []

    def test_repr(self) -> None:
        args = parse_options("/title/hello")
        assert "hello" in repr(args)
        assert repr(args).startswith("PageArguments(")


class TestPageArgumentsConstructor:
    def test_mixed_case_record_readable_through_every_accessor(self) -> None:
        args = PageArguments({"Edit": Argument("Edit", None, "")})
        assert list(args) == ["Edit"]
        assert len(args) == 1
        assert "Edit" in args
        assert "edit" in args
        assert args["Edit"] is None
        assert args["EDIT"] is None
        assert args.get("edit", "missing") is None
        assert args.get_raw("Edit") == ""
        assert args.get_argument("edit") == Argument("Edit", None, "")
        assert args.is_set("Edit")
        assert args.get_bool("Edit") is True
        assert args.to_dict() == {"Edit": None}

    def test_keyed_by_record_key(self) -> None:
        args = PageArguments({"whatever": Argument("Offset", 3, "3")})
        assert list(args) == ["Offset"]
        assert args["offset"] == 3
        assert "whatever" not in args

    def test_equal_keys_collapse(self) -> None:
        args = PageArguments(
            {
                "a": Argument("Edit", 1, "1"),
                "b": Argument("EDIT", 2, "2"),
            }
        )
        assert len(args) == 1
        assert list(args) == ["Edit"]
        assert args["edit"] == 2
        assert args.get_raw("edit") == "2"

    def test_equals_from_pairs(self) -> None:
        direct = PageArguments({"Edit": Argument("Edit", True, "true")})
        assert direct == PageArguments.from_pairs([("Edit", True, "true")])
