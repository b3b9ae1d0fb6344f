"""Two-tier candidate selection.

Tier 1 prefers hospitality venues; Tier 2 accepts any result located in
the target country. Ties go to provider order. A candidate without
coordinates is never selected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..domain.models import RawCandidate

HOSPITALITY_WORDS = ("hotel", "resort", "villa")


def is_hospitality(candidate: RawCandidate) -> bool:
    """Whether the candidate looks like a hotel, resort or villa."""
    # Nominatim class is usually tourism or amenity; a bare "tourism" class does not qualify
    if (
        candidate.kind.is_hospitality
        or candidate.class_kind.is_hospitality
        or candidate.tourism_kind.is_hospitality
    ):
        return True
    label = candidate.display_name.lower()
    return any(word in label for word in HOSPITALITY_WORDS)


@dataclass(frozen=True)
class CandidateSelector:
    """Picks the best candidate from one query's results.

    Attributes:
        country_code: ISO code accepted by Tier 2 (lower case)
        country_names: Names that, found in the display name, also count
    """

    country_code: str = "it"
    country_names: tuple[str, ...] = ("italy", "italia")

    def is_in_country(self, candidate: RawCandidate) -> bool:
        if candidate.country_code == self.country_code.lower():
            return True
        label = candidate.display_name.lower()
        return any(name.lower() in label for name in self.country_names)

    def select(self, candidates: Sequence[RawCandidate]) -> Optional[RawCandidate]:
        """Tier 1, then Tier 2, among candidates that carry coordinates."""
        located = [c for c in candidates if c.coordinates is not None]
        for candidate in located:
            if is_hospitality(candidate):
                return candidate
        for candidate in located:
            if self.is_in_country(candidate):
                return candidate
        return None
