"""
Default city catalogue.

Static reference data handed to ``RoutePlanner`` at startup.  The list is
never mutated; deployments that need another set of locations pass their
own sequence instead.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.entities import Location

CITIES: tuple[Location, ...] = (
    Location("Tbilisi", 41.7151, 44.8271, "Tbilisi"),
    Location("Kutaisi", 42.2500, 42.7000, "Imereti"),
    Location("Batumi", 41.6168, 41.6367, "Adjara"),
    Location("Rustavi", 41.5495, 45.0360, "Kvemo Kartli"),
    Location("Zugdidi", 42.5126, 41.8709, "Samegrelo-Zemo Svaneti"),
    Location("Gori", 41.9844, 44.1125, "Shida Kartli"),
    Location("Poti", 42.1462, 41.6717, "Samegrelo-Zemo Svaneti"),
    Location("Telavi", 41.9198, 45.4731, "Kakheti"),
    Location("Samtredia", 42.1547, 42.3367, "Imereti"),
    Location("Zestaponi", 42.1103, 43.0409, "Imereti"),
    Location("Akhaltsikhe", 41.6390, 42.9826, "Samtskhe-Javakheti"),
    Location("Borjomi", 41.8384, 43.3794, "Samtskhe-Javakheti"),
    Location("Mtskheta", 41.8454, 44.7188, "Mtskheta-Mtianeti"),
    Location("Ozurgeti", 41.9244, 42.0061, "Guria"),
    Location("Kobuleti", 41.8206, 41.7759, "Adjara"),
    Location("Khashuri", 41.9943, 43.5994, "Shida Kartli"),
)


def search_cities(
    query: str, cities: Sequence[Location] = CITIES
) -> list[Location]:
    """Case-insensitive substring match on the name.  Empty query -> []."""
    if not query:
        return []
    needle = query.lower()
    return [city for city in cities if needle in city.name.lower()]


def cities_in_region(
    region: str, cities: Sequence[Location] = CITIES
) -> list[Location]:
    return [city for city in cities if city.region == region]
