"""CSV city keyword repository.

Loads the city names used by the locality-only fallback from a CSV
file with a ``city`` column. Row order is match priority.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from ...config import get_config
from ...domain.errors import KeywordTableError


@dataclass
class CsvCityKeywordRepository:
    """City keyword table backed by a CSV file.

    This adapter implements CityKeywordPort. The file is read once,
    on first access.

    Attributes:
        path: Path to the CSV file
    """

    path: Path = field(default_factory=lambda: get_config().resolution.keywords_path)
    _logger: logging.Logger = field(init=False, repr=False)

    _keywords: Optional[tuple[str, ...]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def keywords(self) -> Sequence[str]:
        """Return city names in file order.

        Raises:
            KeywordTableError: If the file cannot be read.
        """
        if self._keywords is not None:
            return self._keywords

        try:
            self._keywords = self._load()
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise KeywordTableError(
                f"Failed to load city keywords: {e}",
                file_path=str(self.path),
                cause=e,
            )

        self._logger.debug(
            "City keywords loaded",
            extra={"count": len(self._keywords), "path": str(self.path)},
        )
        return self._keywords

    def _load(self) -> tuple[str, ...]:
        seen: set[str] = set()
        cities: list[str] = []
        with Path(self.path).open(encoding="utf-8", newline="") as f:
            reader = csv.DictReader(f)
            for row in reader:
                city = (row.get("city") or "").strip()
                if city and city.lower() not in seen:
                    seen.add(city.lower())
                    cities.append(city)
        return tuple(cities)
