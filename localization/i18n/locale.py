"""
Locale helpers

Pure functions for locale handling:
- Text direction from an ISO 15924 script tag
- Accept-Language header parsing with quality-value (q=) support
"""

from __future__ import annotations

from collections.abc import Iterable

# ── Constants ─────────────────────────────────────────────────────────────────

# ISO 15924 scripts that read right-to-left
RTL_SCRIPTS: frozenset[str] = frozenset({"Arab", "Hebr", "Mong", "Tfng", "Thaa"})

LTR = "ltr"
RTL = "rtl"


# ── Public helpers ────────────────────────────────────────────────────────────


def script_direction(script: str | None) -> str:
    """Return "rtl" for right-to-left scripts and "ltr" for everything else.

    Args:
        script: ISO 15924 script tag, e.g. "Latn", "Arab". ``None`` reads LTR.
    """
    return RTL if script in RTL_SCRIPTS else LTR


def normalize_tag(tag: str) -> str:
    """Lower-case a language tag and use hyphens as separators ("pt_BR" → "pt-br")."""
    return tag.strip().replace("_", "-").lower()


def parse_accept_language(header: str | None) -> list[str]:
    """Parse an Accept-Language header into tags ordered by preference.

    Entries with ``q=0`` and the ``*`` wildcard are dropped. Entries sharing
    the same q-value keep their header order. Malformed q-values
    count as 1.0.

    Args:
        header: Value of the Accept-Language HTTP header, e.g.
                "fr-CA,fr;q=0.9,en-US;q=0.8,en;q=0.7".

    Returns:
        Language tags, most preferred first.
    """
    if not header:
        return []

    # Parse "tag;q=value" pairs
    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue
        tag, _, params = part.partition(";")
        q = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                q = float(params[2:].strip())
            except ValueError:
                q = 1.0
        tag = tag.strip()
        if not tag or tag == "*" or q <= 0:
            continue
        weighted.append((q, tag))

    # Stable sort keeps header order for equal q-values
    weighted.sort(key=lambda x: x[0], reverse=True)
    return [tag for _, tag in weighted]


def best_match(header: str | None, supported: Iterable[str]) -> str | None:
    """Return the supported locale that best matches an Accept-Language header.

    Algorithm:
    1. Order header tags by q-value (see :func:`parse_accept_language`).
    2. For each tag, try an exact match in `supported`, then its base language
       ("fr-CA" → "fr").
    3. Return the first match or None if nothing matches.

    Args:
        header:    Value of the Accept-Language HTTP header.
        supported: Locale codes the application supports, in priority order.

    Returns:
        The matching code exactly as spelled in `supported`, or None.
    """
    candidates = {normalize_tag(code): code for code in supported}
    if not candidates:
        return None

    for tag in parse_accept_language(header):
        tag_lower = normalize_tag(tag)
        # Exact match
        if tag_lower in candidates:
            return candidates[tag_lower]
        # Base language match: "fr-CA" → try "fr"
        base = tag_lower.split("-")[0]
        if base in candidates:
            return candidates[base]

    return None
