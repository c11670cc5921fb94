"""Package specifier parsing: ``@scope/name/sub/path@tag`` -> name, collection, tag."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TAG = "latest"


@dataclass(frozen=True)
class ParsedSpecifier:
    """A dependency specifier split into its parts.

    Attributes
    ----------
    package_name:
        npm-resolvable name, scope-aware, with the version tag stripped.
    collection_name:
        ``package_name`` followed by whatever the raw specifier carried after
        the package boundary (a sub-path export such as ``lodash/fp``).
    tag:
        Version or dist-tag; ``"latest"`` when the specifier has none.
    """

    package_name: str
    collection_name: str
    tag: str


def _head(raw: str) -> str:
    """Leading package segment(s) of *raw*, version tag still attached.

    Scoped specifiers keep two ``/`` segments (``@scope/name``), unscoped keep one.
    """
    segments = raw.split("/")
    if raw.startswith("@"):
        return "/".join(segments[:2])
    return segments[0]


def parse_specifier(raw: str) -> ParsedSpecifier:
    """Parse a raw dependency string.

    Never raises: missing segments fall back to empty names or the default tag.

    >>> parse_specifier("@nestjs/graphql@8")
    ParsedSpecifier(package_name='@nestjs/graphql', collection_name='@nestjs/graphql', tag='8')
    >>> parse_specifier("lodash/fp").collection_name
    'lodash/fp'
    """
    head = _head(raw)
    parts = head.split("@")

    # The scope's own leading "@" is a split boundary, so a scoped name
    # occupies two parts ("" and "scope/name") before the tag.
    if head.startswith("@"):
        package_name = "@".join(parts[:2])
        tag = parts[2] if len(parts) > 2 else ""
    else:
        package_name = parts[0]
        tag = parts[1] if len(parts) > 1 else ""

    collection_name = package_name + raw[len(head):]
    return ParsedSpecifier(
        package_name=package_name,
        collection_name=collection_name,
        tag=tag or DEFAULT_TAG,
    )
