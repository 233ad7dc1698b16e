"""Pydantic models for raw schema types and their localized views."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

TypeId = int


class SchemaType(BaseModel):
    """
    One raw taxonomy node as delivered by the remote schema.

    Only `id` is required; every other field degrades to an empty/zero default
    during localization. Unknown fields are ignored.
    """

    id: TypeId
    parent_id: TypeId | None = None
    pending: bool | None = None
    scientific_names: list[str] | None = None
    common_names: dict[str, list[str]] | None = Field(
        default=None,
        description="Language code -> ordered common names (first one wins).",
    )
    taxonomic_rank: int | None = None
    urls: dict[str, str] | None = None


class LocalizedType(BaseModel):
    """A taxonomy node resolved for a single language."""

    model_config = ConfigDict(frozen=True)

    id: TypeId
    parent_id: TypeId
    scientific_name: str = ""
    common_name: str = ""
    taxonomic_rank: int = 0  # higher = more specific
    urls: Mapping[str, str] = Field(default_factory=lambda: MappingProxyType({}))

    @field_validator("urls", mode="after")
    @classmethod
    def _freeze_urls(cls, urls: Mapping[str, str]) -> Mapping[str, str]:
        # read-only private copy; filtered and extended views reuse the same record
        return MappingProxyType(dict(urls))

    @field_serializer("urls")
    def _dump_urls(self, urls: Mapping[str, str]) -> dict[str, str]:
        return dict(urls)


class TypeSelectMenuEntry(BaseModel):
    """Dropdown entry for a single type."""

    model_config = ConfigDict(frozen=True)

    value: TypeId
    label: str
    common_name: str
    scientific_name: str
    taxonomic_rank: int
