import logging
from typing import Any, Dict, List, Optional

import requests

from .config import GeoNamesConfig
from .datasource import GazetteerDataSource
from .domain import GeoPlace
from .errors import GazetteerError, NetworkError

logger = logging.getLogger(__name__)


class DataSourceGeoNames(GazetteerDataSource):
    """
    Implementation of GazetteerDataSource for the GeoNames JSON web service.
    """
    def __init__(self, config: GeoNamesConfig, session: Optional[requests.Session] = None):
        """
        Initializes the data source with the GeoNames settings.

        :param config: GeoNames configuration (username, endpoints, country)
        :param session: Optional HTTP session, a new requests.Session by default
        """
        self.config = config
        self.session = session if session is not None else requests.Session()

    def get_children(self, parent_id: str) -> List[GeoPlace]:
        """
        Retrieve the direct children of a place from the childrenJSON endpoint.

        :param parent_id: GeoNames id of the parent place
        :return: List of GeoPlace objects
        """
        data = self._get_json(self.config.children_url, {"geonameId": parent_id})
        return self._parse_places(data)

    def search_places(self, name: str, admin_name1: str, country_code: str) -> List[GeoPlace]:
        """
        Search populated places (feature class P) with the searchJSON endpoint.

        :param name: City name
        :param admin_name1: State name
        :param country_code: ISO country code
        :return: List of GeoPlace objects
        """
        data = self._get_json(self.config.search_url, {
            "q": name,
            "adminName1": admin_name1,
            "country": country_code,
            "featureClass": "P",
        })
        return self._parse_places(data)

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        Performs a GET request and decodes the JSON reply.

        GeoNames reports errors such as an invalid username with HTTP 200 and
        a "status" object, so those are checked as well.
        """
        params = dict(params, username=self.config.username)
        logger.debug(f"GET {url} {params}")
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.JSONDecodeError as e:
            raise GazetteerError(f"GeoNames returned invalid JSON from {url}: {e}") from e
        except requests.RequestException as e:
            raise NetworkError(f"GeoNames request to {url} failed: {e}") from e

        if not isinstance(data, dict):
            raise GazetteerError(f"GeoNames returned {type(data).__name__} instead of an object from {url}")

        status = data.get("status")
        if isinstance(status, dict):
            raise GazetteerError(
                f"GeoNames error {status.get('value')} from {url}: {status.get('message')}"
            )
        if status:
            raise GazetteerError(f"GeoNames error from {url}: {status}")
        return data

    def _parse_places(self, data: Dict[str, Any]) -> List[GeoPlace]:
        places = []
        for entry in data.get("geonames", []):
            try:
                places.append(GeoPlace.model_validate(entry))
            except ValueError as e:
                logger.warning(f"Skipping malformed GeoNames entry {entry!r}: {e}")
        return places
