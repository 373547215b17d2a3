from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

# Data models for places returned by the GeoNames web service, using Pydantic.

GEONAMES_IRI_TEMPLATE = "http://sws.geonames.org/{geoname_id}/"
GEONAMES_PAGE_TEMPLATE = "https://www.geonames.org/{geoname_id}/"


def geo_iri(geoname_id: str) -> str:
    """Machine-resolvable GeoNames IRI for a place (the one used in the ontology)."""
    return GEONAMES_IRI_TEMPLATE.format(geoname_id=geoname_id)


def geo_iri_alt(geoname_id: str) -> str:
    """Human-browsable GeoNames page for a place."""
    return GEONAMES_PAGE_TEMPLATE.format(geoname_id=geoname_id)


class GeoPlace(BaseModel):
    # A single entry of a GeoNames "geonames" result array.
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    geoname_id: str = Field(..., alias="geonameId", description="GeoNames identifier of the place")
    name: str = Field(..., description="Place name")
    feature_code: Optional[str] = Field(None, alias="fcode", description="Feature code, e.g. ADM1, ADM2, PPL")
    admin_name1: Optional[str] = Field(None, alias="adminName1", description="First-level administrative division name")
    country_code: Optional[str] = Field(None, alias="countryCode", description="ISO country code")

    @field_validator("geoname_id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        # GeoNames returns ids as JSON numbers
        return str(value) if value is not None else value

    @property
    def iri(self) -> str:
        return geo_iri(self.geoname_id)

    def is_admin_division(self, level: int) -> bool:
        return self.feature_code == f"ADM{level}"


class CityStatePair(BaseModel):
    # A city to look up, qualified by the name of its state.
    city: str = Field(..., description="City name")
    state: str = Field(..., description="State (first-level administrative division) name")

    @classmethod
    def parse(cls, text: str) -> Optional["CityStatePair"]:
        """Parse "City, State"; anything else yields None."""
        parts = text.split(", ")
        if len(parts) != 2:
            return None
        city, state = parts[0].strip(), parts[1].strip()
        if not city or not state:
            return None
        return cls(city=city, state=state)
