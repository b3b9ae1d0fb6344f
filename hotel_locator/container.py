"""Dependency wiring for hotel location resolution.

Bindings are explicit: each port or service type maps to a factory.
``Container.create_default`` builds the production graph and constructs
the geocoding adapter right away, so a misconfigured provider is reported
at startup. The container is safe to share between request threads.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class _Binding:
    factory: Callable[[], Any]
    singleton: bool
    instance: Any = None
    built: bool = False


@dataclass
class Container:
    """Maps port and service types to factories.

    Usage:
        container = Container.create_default()
        gate = container.resolve(HotelGeocodeService)

        # In tests, bind a double instead
        container = Container()
        container.register(GeocoderPort, FakeGeocoder)

    Attributes:
        config: Configuration the default bindings are built from
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        A singleton binding calls the factory once, on first resolve.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory, singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If nothing is bound to the type.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            if not binding.singleton:
                return binding.factory()
            if not binding.built:
                binding.instance = binding.factory()
                binding.built = True
            return binding.instance

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._bindings

    def clear_all(self) -> None:
        with self._lock:
            self._bindings.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Build the production container.

        Raises:
            ConfigurationError: If the geocoding provider is misconfigured.
        """
        from .ports.geocoding import GeocoderPort

        container = cls(config=config or get_config())
        _bind_defaults(container)
        container.resolve(GeocoderPort)
        return container


def _bind_defaults(container: Container) -> None:
    from .adapters.geocoding import NominatimGeocoderAdapter
    from .adapters.keywords import CsvCityKeywordRepository
    from .ports.geocoding import GeocoderPort
    from .ports.keywords import CityKeywordPort
    from .services import (
        CandidateSearch,
        CandidateSelector,
        CityFallback,
        HotelGeocodeService,
        LocationResolverService,
    )

    geocoding = container.config.geocoding
    resolution = container.config.resolution

    def location_resolver() -> LocationResolverService:
        geocoder = container.resolve(GeocoderPort)
        return LocationResolverService(
            geocoder=geocoder,
            search=CandidateSearch(geocoder, limit=resolution.search_limit),
            selector=CandidateSelector(
                country_code=resolution.country_code,
                country_names=tuple(resolution.country_names),
            ),
            fallback=CityFallback(
                geocoder,
                container.resolve(CityKeywordPort),
                limit=resolution.fallback_limit,
            ),
            default_country=resolution.default_country,
        )

    container.register(GeocoderPort, lambda: NominatimGeocoderAdapter(geocoding))
    container.register(
        CityKeywordPort, lambda: CsvCityKeywordRepository(resolution.keywords_path)
    )
    container.register(LocationResolverService, location_resolver)
    container.register(
        HotelGeocodeService,
        lambda: HotelGeocodeService(container.resolve(LocationResolverService)),
    )


_default_container: Optional[Container] = None
_default_lock = threading.Lock()


def get_container() -> Container:
    """Return the process-wide container, building it on first use."""
    global _default_container
    if _default_container is None:
        with _default_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Drop the process-wide container (tests call this between cases)."""
    global _default_container
    with _default_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
