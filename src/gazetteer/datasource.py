from typing import List

from .domain import GeoPlace


class GazetteerDataSource:
    """
    This class serves as an interface for looking up places in a gazetteer.
    """
    def get_children(self, parent_id: str) -> List[GeoPlace]:
        """
        Retrieve the direct children of a place (e.g. the states of a country).

        :param parent_id: Gazetteer identifier of the parent place
        :return: List of GeoPlace objects
        """
        raise NotImplementedError

    def search_places(self, name: str, admin_name1: str, country_code: str) -> List[GeoPlace]:
        """
        Search populated places by name within a country and first-level division.

        :param name: Place name to search for
        :param admin_name1: Name of the first-level administrative division
        :param country_code: ISO country code
        :return: List of GeoPlace objects in the order returned by the gazetteer
        """
        raise NotImplementedError
