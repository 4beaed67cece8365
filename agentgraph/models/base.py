"""Shared pydantic base for the camelCase documents this package reads and writes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """base model with snake_case attributes and camelCase keys on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    def to_dict(self) -> dict:
        """Dump with camelCase keys, leaving out unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class FrozenCamelModel(CamelModel):
    """input records; treated as immutable once parsed."""

    model_config = ConfigDict(frozen=True)
