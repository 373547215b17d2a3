import logging
import os
from typing import Dict, Iterable, Optional

from .config import GeoNamesConfig
from .datasource import GazetteerDataSource
from .domain import CityStatePair, geo_iri

logger = logging.getLogger(__name__)


class GazetteerService:
    """
    Service class for retrieving geographic reference data to be added to an ontology.
    Results are returned as id -> name mappings; administrative division listings
    are also written to text files for audit.
    """

    def __init__(self, datasource: GazetteerDataSource, config: GeoNamesConfig):
        """
        Initialize the gazetteer service.

        :param datasource: The datasource implementation to use for lookups
        :param config: GeoNames configuration (country and output directory)
        """
        self.datasource = datasource
        self.config = config

    def query_admin_divisions(self, parent_id: str, admin_level: int,
                              output_file: Optional[str] = None) -> Dict[str, str]:
        """
        Retrieve the children of a place at the given administrative level.

        Every match is also written as a "name | IRI" line to
        <output_dir>/<parent_id>-<level>_level_admin_divisions.txt.

        :param parent_id: GeoNames id of the parent place (country or state)
        :param admin_level: Administrative level, 1 for states, 2 for districts
        :param output_file: Optional path overriding the default listing file
        :return: Dict mapping geoname id to place name
        """
        if output_file is None:
            output_file = os.path.join(
                self.config.output_dir, f"{parent_id}-{admin_level}_level_admin_divisions.txt"
            )

        divisions = {}
        lines = []
        for place in self.datasource.get_children(parent_id):
            if place.is_admin_division(admin_level):
                divisions[place.geoname_id] = place.name
                lines.append(f"{place.name} | {geo_iri(place.geoname_id)}\n")

        os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
        with open(output_file, "w", encoding="utf-8") as file:
            file.writelines(lines)

        logger.info(f"Found {len(divisions)} ADM{admin_level} divisions under {parent_id}, "
                    f"listing written to {output_file}")
        return divisions

    def get_city_ids(self, city_state_pairs: Iterable[str]) -> Dict[str, str]:
        """
        Resolve "City, State" strings to GeoNames ids.

        The first search result whose name equals the city (ignoring case) is
        taken. Malformed pairs and cities without a match are left out.

        :param city_state_pairs: Strings formatted as "City, State"
        :return: Dict mapping geoname id to city name
        """
        city_ids = {}
        for text in city_state_pairs:
            pair = CityStatePair.parse(text)
            if pair is None:
                logger.warning(f"Skipping '{text}': expected 'City, State'")
                continue

            places = self.datasource.search_places(pair.city, pair.state, self.config.country_code)
            match = next((p for p in places if p.name.lower() == pair.city.lower()), None)
            if match is None:
                logger.warning(f"No GeoNames match for {pair.city} ({pair.state})")
                continue
            city_ids[match.geoname_id] = match.name

        logger.info(f"Resolved {len(city_ids)} cities")
        return city_ids
