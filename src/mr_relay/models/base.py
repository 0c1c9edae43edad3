from typing import Any
from pydantic import BaseModel, model_validator


class NullDefaultsModel(BaseModel):
    """Explicit nulls, for the model itself or any of its fields, fall back to defaults."""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
