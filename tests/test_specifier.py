"""Tests for graft.specifier — package specifier parsing."""

from __future__ import annotations

import pytest

from graft.specifier import DEFAULT_TAG, ParsedSpecifier, parse_specifier


class TestScopedSpecifiers:
    def test_scope_without_tag(self) -> None:
        parsed = parse_specifier("@nestjs/graphql")
        assert parsed.package_name == "@nestjs/graphql"
        assert parsed.collection_name == "@nestjs/graphql"
        assert parsed.tag == "latest"

    def test_scope_with_major_tag(self) -> None:
        parsed = parse_specifier("@nestjs/graphql@8")
        assert parsed == ParsedSpecifier("@nestjs/graphql", "@nestjs/graphql", "8")

    def test_scope_with_full_version(self) -> None:
        parsed = parse_specifier("@nestjs/swagger@6.1.0")
        assert parsed.package_name == "@nestjs/swagger"
        assert parsed.tag == "6.1.0"

    def test_scope_with_dist_tag(self) -> None:
        assert parse_specifier("@angular/core@next").tag == "next"

    def test_scope_with_sub_path(self) -> None:
        """Text after ``@scope/name`` is kept on the collection name only."""
        parsed = parse_specifier("@scope/name/schematics")
        assert parsed.package_name == "@scope/name"
        assert parsed.collection_name == "@scope/name/schematics"
        assert parsed.tag == "latest"


class TestUnscopedSpecifiers:
    def test_bare_name(self) -> None:
        parsed = parse_specifier("class-validator")
        assert parsed == ParsedSpecifier("class-validator", "class-validator", "latest")

    def test_name_with_version(self) -> None:
        parsed = parse_specifier("lodash@4.17.0")
        assert parsed.package_name == "lodash"
        assert parsed.collection_name == "lodash"
        assert parsed.tag == "4.17.0"

    def test_name_with_sub_path(self) -> None:
        parsed = parse_specifier("lodash/fp")
        assert parsed.package_name == "lodash"
        assert parsed.collection_name == "lodash/fp"
        assert parsed.tag == "latest"

    def test_range_tag(self) -> None:
        assert parse_specifier("rxjs@^7.8.0").tag == "^7.8.0"


class TestMalformedInput:
    """Malformed specifiers never raise; missing parts fall back."""

    def test_empty_string(self) -> None:
        parsed = parse_specifier("")
        assert parsed.package_name == ""
        assert parsed.tag == DEFAULT_TAG

    def test_trailing_at(self) -> None:
        parsed = parse_specifier("lodash@")
        assert parsed.package_name == "lodash"
        assert parsed.tag == "latest"

    def test_scope_only(self) -> None:
        parsed = parse_specifier("@scope")
        assert parsed.package_name == "@scope"
        assert parsed.tag == "latest"

    def test_extra_at_segments_ignored(self) -> None:
        parsed = parse_specifier("name@1@2")
        assert parsed.package_name == "name"
        assert parsed.tag == "1"


@pytest.mark.parametrize(
    "raw",
    [
        "@nestjs/graphql",
        "@nestjs/graphql@8",
        "lodash@4.17.0",
        "lodash/fp",
        "@scope/name/sub/path",
        "class-validator",
    ],
)
def test_package_name_is_prefix_of_raw(raw: str) -> None:
    parsed = parse_specifier(raw)
    assert raw.startswith(parsed.package_name)
    assert parsed.collection_name.startswith(parsed.package_name)
