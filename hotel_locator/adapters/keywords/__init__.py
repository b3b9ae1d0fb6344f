"""Keyword adapters - Implementations of CityKeywordPort.

Available implementations:
- CsvCityKeywordRepository: city names read from a CSV file
"""

from .csv_keywords import CsvCityKeywordRepository

__all__ = ["CsvCityKeywordRepository"]
