"""Keyword port - Source of the city names used by the locality fallback."""

from __future__ import annotations

from typing import Protocol, Sequence


class CityKeywordPort(Protocol):
    """Port for the city keyword table.

    Implementation: adapters/keywords/csv_keywords.py
    """

    def keywords(self) -> Sequence[str]:
        """Return city names in match-priority order."""
        ...
