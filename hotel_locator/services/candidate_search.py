"""Candidate search over the query ladder.

The ladder goes from the most to the least specific query. It is a
precision-relaxation sequence, not a retry loop: the first rung that
yields an accepted candidate stops it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple

from ..domain.errors import GeocodingError
from ..domain.models import RawCandidate
from ..ports.geocoding import GeocoderPort

Selector = Callable[[Sequence[RawCandidate]], Optional[RawCandidate]]


def build_query_ladder(name: str, country: str) -> Tuple[str, ...]:
    """Return the search queries for ``name``, most specific first."""
    name = name.strip()
    country = country.strip()
    return (
        f"{name} hotel {country}",
        f"{name} {country}",
        f"hotel {name} {country}",
        name,
    )


@dataclass
class CandidateSearch:
    """Runs the query ladder against the geocoder.

    Attributes:
        geocoder: Provider to query
        limit: Maximum results requested per query
    """

    geocoder: GeocoderPort
    limit: int = 10

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def attempt(self, query: str) -> List[RawCandidate]:
        """Run one query; a failed request counts as no results."""
        self._logger.debug("Trying search query", extra={"query": query})
        try:
            candidates = list(self.geocoder.search(query, self.limit, extra_tags=True))
        except GeocodingError as e:
            self._logger.warning(
                "Search query failed",
                extra={
                    "query": query,
                    "error": str(e),
                    "rate_limited": e.is_rate_limited,
                },
            )
            return []

        if not candidates:
            self._logger.debug("No results for query", extra={"query": query})
        else:
            self._logger.debug(
                "Found results for query",
                extra={"query": query, "count": len(candidates)},
            )
        return candidates

    def search(self, name: str, country: str) -> List[RawCandidate]:
        """Return the results of the first query that found anything.

        Results are never merged across queries.
        """
        for query in build_query_ladder(name, country):
            candidates = self.attempt(query)
            if candidates:
                return candidates
        return []

    def search_and_select(
        self, name: str, country: str, select: Selector
    ) -> Optional[Tuple[str, RawCandidate]]:
        """Walk the ladder until ``select`` accepts a candidate.

        A result set that ``select`` rejects is treated like an empty one
        and the next query is tried.

        Returns:
            The accepted (query, candidate) pair, or None when every
            query failed or was rejected.
        """
        for query in build_query_ladder(name, country):
            candidates = self.attempt(query)
            if not candidates:
                continue

            chosen = select(candidates)
            if chosen is not None:
                self._logger.info(
                    "Selected result",
                    extra={"query": query, "display_name": chosen.display_name},
                )
                return query, chosen

            self._logger.debug(
                "No acceptable candidate for query",
                extra={"query": query, "count": len(candidates)},
            )
        return None
