"""
Gazetteer Module

Retrieves geographic reference data (administrative divisions and cities of
a country) from the GeoNames web service for ingestion into an ontology.

Public Interface:
- GazetteerService: administrative division and city lookups
- DataSourceGeoNames: GeoNames JSON API client
- GeoNamesConfig: service settings (from environment / .env)
- geo_iri, geo_iri_alt: IRI templates for GeoNames ids
"""

from .config import GeoNamesConfig
from .datasource_geonames import DataSourceGeoNames
from .domain import GeoPlace, CityStatePair, geo_iri, geo_iri_alt
from .errors import GazetteerError, NetworkError
from .service import GazetteerService

__all__ = [
    "GazetteerService",
    "DataSourceGeoNames",
    "GeoNamesConfig",
    "GeoPlace",
    "CityStatePair",
    "geo_iri",
    "geo_iri_alt",
    "GazetteerError",
    "NetworkError",
]
