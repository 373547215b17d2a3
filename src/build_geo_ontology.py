#!/usr/bin/env python3
"""
CLI tool for adding GeoNames places to an OWL ontology.

This script:
1. Opens an existing ontology or creates a new one
2. Fetches the first-level administrative divisions (states) of a country
3. Optionally fetches the second-level divisions (districts) of every state
4. Optionally resolves a list of "City, State" lines to GeoNames cities
5. Adds every place as a typed individual under its GeoNames IRI
6. Saves the lookup tables as JSON and the ontology document

Usage:
    python build_geo_ontology.py --output geo.owl
    python build_geo_ontology.py --input base.owl --output geo.owl --districts
    python build_geo_ontology.py --output geo.owl --cities city-state_pairs.txt
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add the src directory to the path so we can import from other modules
src_dir = Path(__file__).parent
sys.path.insert(0, str(src_dir))

from ontology import OntologyService, OntologyError
from ontology.annotations import strip_accents
from ontology.files import entities_from_file
from gazetteer import DataSourceGeoNames, GazetteerError, GazetteerService, GeoNamesConfig, geo_iri
from gazetteer.files import put_object

load_dotenv()

logger = logging.getLogger(__name__)


def build_place_classes(service: OntologyService, parent_class: str = None) -> dict:
    """Create the Place taxonomy the imported individuals are typed with."""
    place = parent_class or service.add_class("Place")
    state, district, city = service.add_subclasses(place, ["State", "District", "City"])
    located_in = service.add_object_property_with_domain_range("located in", [district, city], state)
    return {"place": place, "state": state, "district": district, "city": city, "located_in": located_in}


def add_places(service: OntologyService, places: dict, type_iri: str, keep_accents: bool) -> dict:
    """Add geoname id -> name entries as individuals; returns geoname id -> IRI."""
    iris = {}
    for geoname_id, name in places.items():
        label = name if keep_accents else strip_accents(name)
        iris[geoname_id] = service.add_individual_by_iri(geo_iri(geoname_id), label, type_iri)
    return iris


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Add GeoNames administrative divisions and cities to an OWL ontology",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # New ontology with the states of India
  python build_geo_ontology.py --output geo.owl

  # Extend an existing ontology with states and districts
  python build_geo_ontology.py --input base.owl --output geo.owl --districts

  # Add cities listed as "City, State" lines
  python build_geo_ontology.py --output geo.owl --cities city-state_pairs.txt

The GeoNames username is read from GEONAMES_USERNAME (environment or .env).
        """
    )

    parser.add_argument("--input", help="Existing ontology document to extend")
    parser.add_argument("--output", required=True, help="Where to save the resulting ontology")
    parser.add_argument(
        "--namespace",
        default=os.getenv("ONTOLOGY_NAMESPACE", "http://example.org/ontology/"),
        help="Namespace prefix for newly minted IRIs"
    )
    parser.add_argument("--parent-class", help="IRI of an existing class to put the Place classes under")
    parser.add_argument("--country-id", help="GeoNames id of the country (default from config)")
    parser.add_argument("--districts", action="store_true", help="Also import second-level divisions")
    parser.add_argument("--cities", help="Text file with one 'City, State' per line")
    parser.add_argument("--keep-accents", action="store_true", help="Keep diacritics in labels")
    parser.add_argument("--output-dir", help="Directory for listings and lookup tables")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    try:
        config = GeoNamesConfig.from_env()
    except ValueError as e:
        parser.error(str(e))
    if args.country_id:
        config.country_id = args.country_id
    if args.output_dir:
        config.output_dir = args.output_dir

    try:
        if args.input:
            print(f"Opening ontology: {args.input}")
            service = OntologyService.open(args.input, args.namespace)
        else:
            print(f"Creating new ontology in namespace {args.namespace}")
            service = OntologyService.create(args.namespace)

        gazetteer = GazetteerService(DataSourceGeoNames(config), config)
        classes = build_place_classes(service, args.parent_class)

        states = gazetteer.query_admin_divisions(config.country_id, 1)
        put_object(states, os.path.join(config.output_dir, "states.json"))
        state_iris = add_places(service, states, classes["state"], args.keep_accents)
        print(f"Added {len(state_iris)} states")

        if args.districts:
            districts_by_state = {}
            for state_id, state_iri in state_iris.items():
                logger.info(f"Looking at administrative division: {state_id}")
                districts = gazetteer.query_admin_divisions(state_id, 2)
                districts_by_state[state_id] = districts
                district_iris = add_places(service, districts, classes["district"], args.keep_accents)
                for district_iri in district_iris.values():
                    service.assert_object_property_assertion(district_iri, state_iri, classes["located_in"])
            put_object(districts_by_state, os.path.join(config.output_dir, "districts_by_state.json"))
            print(f"Added {sum(len(d) for d in districts_by_state.values())} districts")

        if args.cities:
            pairs = entities_from_file(args.cities)
            city_ids = gazetteer.get_city_ids(pairs)
            put_object(city_ids, os.path.join(config.output_dir, "city_ids.json"))
            add_places(service, city_ids, classes["city"], args.keep_accents)
            print(f"Added {len(city_ids)} of {len(pairs)} cities")

        service.save(args.output)

    except (OntologyError, GazetteerError, OSError) as e:
        print(f"Error: {e}")
        return 1

    stats = service.get_stats()
    print(f"Saved {args.output}: {stats.total_classes} classes, "
          f"{stats.total_individuals} individuals, "
          f"{stats.total_object_properties} object properties, "
          f"{stats.total_triples} triples")
    return 0


if __name__ == "__main__":
    sys.exit(main())
