"""
Slug Normalizer
===============

Turns free text into lowercase, hyphen separated, filesystem-safe slugs
used for document descriptions and tag names.
"""

import re

# Deleted outright, not replaced by a separator
_STRIPPED = re.compile(r"[:;.,!?/\\^+<>#@|]")
_SEPARATORS = re.compile(r"[\s_]+")
_HYPHEN_RUNS = re.compile(r"-+")
_NON_TAG_CHARS = re.compile(r"[^a-z0-9]")

UMLAUTS = (
    ("ä", "ae"),
    ("ö", "oe"),
    ("ü", "ue"),
    ("ß", "ss"),
)


def normalize(raw: str) -> str:
    """Normalize free text into a description slug.

    Steps, in order: lowercase, delete ``: ; . , ! ? / \\ ^ + < > # @ |``,
    turn whitespace/underscore runs into a hyphen, collapse hyphen runs,
    spell out German umlauts and strip one leading and one trailing hyphen.

    Args:
        raw: Arbitrary user text.

    Returns:
        The slug, empty for empty input.
    """
    slug = raw.lower()
    slug = _STRIPPED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    for umlaut, replacement in UMLAUTS:
        slug = slug.replace(umlaut, replacement)

    if slug.startswith("-"):
        slug = slug[1:]
    if slug.endswith("-"):
        slug = slug[:-1]
    return slug


def normalize_tag(raw: str) -> str:
    """Normalize free text into a tag name.

    Tag names only keep ``[a-z0-9]`` so they survive the ``_`` separated
    tag block of an archived filename.
    """
    return _NON_TAG_CHARS.sub("", normalize(raw))
