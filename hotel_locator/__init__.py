"""Top-level package for the hotel locator.

Resolves an imprecise, user-typed hotel name into structured location
data (address, coordinates, contact details) using a free-text
geocoding provider, and checks that coordinates are plausible for Italy.
"""

from .pipeline import enrich, is_valid_italian_location, locate_hotel, resolve

__all__ = ["resolve", "enrich", "locate_hotel", "is_valid_italian_location"]
