"""Adapters layer - Concrete implementations of the ports.

- geocoding: geopy-backed Nominatim / LocationIQ client
- keywords: CSV city keyword table
"""
