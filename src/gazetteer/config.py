"""
Configuration for the GeoNames web service client.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass
class GeoNamesConfig:
    """Settings for querying GeoNames.

    The defaults target India (GeoNames id 1269750), the country the import
    tool was first written for.
    """
    username: str
    children_url: str = "http://api.geonames.org/childrenJSON"
    search_url: str = "http://api.geonames.org/searchJSON"
    country_code: str = "IN"
    country_id: str = "1269750"
    output_dir: str = "GeoNames_data"
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "GeoNamesConfig":
        """Build the configuration from environment variables (and a .env file).

        Raises:
            ValueError: If GEONAMES_USERNAME is not set
        """
        load_dotenv()
        username = os.getenv("GEONAMES_USERNAME", "")
        if not username:
            raise ValueError("GEONAMES_USERNAME must be set to query GeoNames")

        return cls(
            username=username,
            country_code=os.getenv("GEONAMES_COUNTRY_CODE", cls.country_code),
            country_id=os.getenv("GEONAMES_COUNTRY_ID", cls.country_id),
            output_dir=os.getenv("GEONAMES_OUTPUT_DIR", cls.output_dir),
            timeout=float(os.getenv("GEONAMES_TIMEOUT", cls.timeout)),
        )
