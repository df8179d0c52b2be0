"""Document models for heroes and comments.

Field names are snake_case in Python and camelCase in the store and in JSON
responses, except for ``_id`` and ``original_id`` which keep their stored names.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Stat = int | float


class _Document(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Powerstats(_Document):
    intelligence: Stat | None = None
    strength: Stat | None = None
    speed: Stat | None = None
    durability: Stat | None = None
    power: Stat | None = None
    combat: Stat | None = None


class Appearance(_Document):
    gender: str | None = None
    race: str | None = None
    height: list[str] = Field(default_factory=list)
    weight: list[str] = Field(default_factory=list)
    eye_color: str | None = None
    hair_color: str | None = None


class Biography(_Document):
    full_name: str | None = None
    alter_egos: str | None = None
    aliases: list[str] = Field(default_factory=list)
    place_of_birth: str | None = None
    first_appearance: str | None = None
    publisher: str | None = None
    alignment: str | None = None


class Work(_Document):
    occupation: str | None = None
    base: str | None = None


class Connections(_Document):
    group_affiliation: str | None = None
    relatives: str | None = None


class Images(_Document):
    xs: str | None = None
    sm: str | None = None
    md: str | None = None
    lg: str | None = None


class Hero(_Document):
    id: str = Field(alias="_id")
    original_id: int | None = Field(default=None, alias="original_id")
    name: str | None = None
    slug: str | None = None
    powerstats: Powerstats = Field(default_factory=Powerstats)
    appearance: Appearance = Field(default_factory=Appearance)
    biography: Biography = Field(default_factory=Biography)
    work: Work = Field(default_factory=Work)
    connections: Connections = Field(default_factory=Connections)
    images: Images = Field(default_factory=Images)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Comment(_Document):
    id: str = Field(alias="_id")
    hero: str
    text: str
    created_at: datetime
    updated_at: datetime
