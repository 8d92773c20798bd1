from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class HotelRecord(BaseModel):
    """One hotel as stored in Hotels.json and returned by the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    id: int = 0
    name: str = ""
    location: str = ""
    rating: float = 0.0
    description: str = ""
    images: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitive(cls, data: Any) -> Any:
        # Accepts Name / name / NAME for every field
        if not isinstance(data, dict):
            return data
        by_lower = {name.lower(): name for name in cls.model_fields}
        normalized = {}
        for key, value in data.items():
            field_name = by_lower.get(str(key).lower())
            if field_name is not None:
                normalized[field_name] = value
        return normalized


class HotelQuery(BaseModel):
    page_number: int = 1
    page_size: int = 9
    filter_text: Optional[str] = None
    min_rating: float = 0.0
    sort_option: Optional[str] = "name"
