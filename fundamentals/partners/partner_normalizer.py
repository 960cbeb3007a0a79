"""
Partner Name Normalizer.

Maps free-text partner mentions from filings to canonical company names,
or discards them as noise. The checks run in a fixed order:

1. lowercase + trim
2. exact exclusion
3. substring exclusion (only for inputs of SUBSTRING_EXCLUSION_MIN_LENGTH+ chars)
4. alias table lookup
5. heuristic cleanup (parentheticals, legal and deal suffixes)
6. token-count plausibility gate
7. description-word gate
8. non-empty result

Exclusions run before the alias table so noise can never resolve to a
canonical name; the alias table runs before cleanup so known aliases are
not mangled by suffix stripping. The function is pure and deterministic.
"""

import re
from typing import Iterable, List, Optional

from config.analysis_config import MAX_PARTNER_NAME_TOKENS, SUBSTRING_EXCLUSION_MIN_LENGTH
from .partner_aliases import (
    DEAL_SUFFIXES,
    DESCRIPTION_PREFIXES,
    EXCLUDED_PARTNERS,
    LEGAL_SUFFIXES,
    PARTNER_ALIASES,
)

_PARENTHETICAL = re.compile(r'\s*\([^)]*\)\s*')
_WHITESPACE = re.compile(r'\s+')
_LEGAL_SUFFIX = re.compile(
    r'[\s,]+(?:' + '|'.join(re.escape(s) for s in LEGAL_SUFFIXES) + r')\.?$',
    re.IGNORECASE,
)
_DEAL_SUFFIX = re.compile(
    r'\s+(?:' + '|'.join(re.escape(s) for s in DEAL_SUFFIXES) + r')$',
    re.IGNORECASE,
)


def is_excluded(lowered: str) -> bool:
    """
    Check a lowercased, trimmed mention against the exclusion set.

    Exact matches are always excluded. Substring matches in either
    direction only count for long inputs, where a collision with an
    excluded phrase is meaningful.
    """
    if lowered in EXCLUDED_PARTNERS:
        return True
    if len(lowered) < SUBSTRING_EXCLUSION_MIN_LENGTH:
        return False
    return any(term in lowered or lowered in term for term in EXCLUDED_PARTNERS)


def clean_partner_name(name: str) -> str:
    """Strip parenthetical asides, legal suffixes and deal descriptors."""
    cleaned = _PARENTHETICAL.sub(' ', name)
    cleaned = _WHITESPACE.sub(' ', cleaned).strip()

    # Suffixes can stack ("Foo Inc. collaboration"), strip until stable
    previous = None
    while cleaned != previous:
        previous = cleaned
        cleaned = _DEAL_SUFFIX.sub('', cleaned).strip()
        cleaned = _LEGAL_SUFFIX.sub('', cleaned).strip()
    return cleaned


def normalize(raw_name: str) -> Optional[str]:
    """
    Normalize a raw partner mention.

    Args:
        raw_name: Partner text as extracted from a filing

    Returns:
        Canonical partner name, or None when the mention is noise

    Examples:
        >>> normalize("Microsoft Corp")
        'Microsoft'
        >>> normalize("FDA") is None
        True
    """
    if not isinstance(raw_name, str):
        return None

    trimmed = raw_name.strip()
    lowered = trimmed.lower()
    if not lowered:
        return None

    if is_excluded(lowered):
        return None

    canonical = PARTNER_ALIASES.get(lowered)
    if canonical is not None:
        return canonical

    cleaned = clean_partner_name(trimmed)
    tokens = cleaned.split()
    if len(tokens) > MAX_PARTNER_NAME_TOKENS:
        return None
    if tokens and tokens[0].lower() in DESCRIPTION_PREFIXES:
        return None

    return cleaned or None


def normalize_partners(raw_names: Iterable[str]) -> List[str]:
    """
    Normalize a list of mentions into distinct canonical names.

    Order follows first appearance; noise is dropped.
    """
    canonical_names = {}
    for raw_name in raw_names:
        canonical = normalize(raw_name)
        if canonical is not None:
            canonical_names.setdefault(canonical, None)
    return list(canonical_names)
