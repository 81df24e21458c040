"""
Place data models for Geocoder Service.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class PlaceResult(BaseModel):
    """A single place returned by the upstream search API.

    Missing or null fields decode to their zero value and unknown upstream fields
    are dropped, so a stored entry only ever carries these twelve keys.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    place_id: int = 0
    licence: str = ""
    osm_type: str = ""
    osm_id: int = 0
    boundingbox: List[str] = Field(default_factory=list)
    lat: str = ""
    lon: str = ""
    display_name: str = ""
    place_class: str = Field(default="", alias="class")
    type: str = ""
    importance: float = 0.0
    icon: str = ""

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        """JSON null decodes to the field's zero value, like an absent key."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class LookupResponse(BaseModel):
    """Response envelope for the lookup endpoint."""

    cache: bool = Field(..., description="True when the data was served from the cache")
    data: List[PlaceResult] = Field(default_factory=list, description="Places in upstream order")


_results_adapter = TypeAdapter(List[PlaceResult])


def dump_results(results: List[PlaceResult]) -> bytes:
    """Serialize a result set to the JSON bytes stored in the cache."""
    return _results_adapter.dump_json(results, by_alias=True)


def load_results(payload: bytes) -> List[PlaceResult]:
    """Parse JSON bytes into a result set.

    Raises ``pydantic.ValidationError`` when the payload is not a JSON
    array of place objects.
    """
    return _results_adapter.validate_json(payload)


def parse_results(raw: object) -> List[PlaceResult]:
    """Validate an already decoded JSON value as a result set."""
    return _results_adapter.validate_python(raw)
