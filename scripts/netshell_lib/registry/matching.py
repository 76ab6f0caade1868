"""
Abbreviation matching.

A token resolves against a candidate set: an exact match wins, otherwise
the candidates it prefixes decide between a unique, absent or ambiguous
result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional


class MatchKind(Enum):
    UNIQUE = "unique"
    NONE = "none"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class PrefixMatch:
    """Outcome of resolving a token against candidate names."""
    kind: MatchKind
    matches: tuple[str, ...] = ()

    @property
    def name(self) -> Optional[str]:
        """The resolved name for a unique match, else None."""
        return self.matches[0] if self.kind is MatchKind.UNIQUE else None


def lookup_by_prefix(partial: str, candidates: Iterable[str]) -> PrefixMatch:
    """
    Match a token against candidates by prefix only.

    Matches are sorted so ambiguity is reported the same way every time.
    """
    matches = tuple(sorted({c for c in candidates if c.startswith(partial)}))
    if not matches:
        return PrefixMatch(MatchKind.NONE)
    if len(matches) == 1:
        return PrefixMatch(MatchKind.UNIQUE, matches)
    return PrefixMatch(MatchKind.AMBIGUOUS, matches)


def resolve_token(token: str, candidates: Iterable[str]) -> PrefixMatch:
    """Exact match first, then unique prefix."""
    candidates = list(candidates)
    if token in candidates:
        return PrefixMatch(MatchKind.UNIQUE, (token,))
    return lookup_by_prefix(token, candidates)
