from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from pokemonapi.db.models import PokemonType

# длину имени и неотрицательность статов проверяет validator в сервисе


class PokemonCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: PokemonType

    attack: int = 0
    defense: int = 0
    health: int = 0
    special_attack: int = 0
    special_defense: int = 0
    speed: int = 0


class PokemonUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # ключ поиска: id, если задан, иначе name
    id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[PokemonType] = None

    attack: Optional[int] = None
    defense: Optional[int] = None
    health: Optional[int] = None
    special_attack: Optional[int] = None
    special_defense: Optional[int] = None
    speed: Optional[int] = None


class PokemonPatch(BaseModel):
    """Тело PUT/PATCH запроса: то же, что PokemonUpdate, но id берётся из пути."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    type: Optional[PokemonType] = None

    attack: Optional[int] = None
    defense: Optional[int] = None
    health: Optional[int] = None
    special_attack: Optional[int] = None
    special_defense: Optional[int] = None
    speed: Optional[int] = None


class PokemonOut(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int
    name: str
    type: PokemonType

    attack: int
    defense: int
    health: int
    special_attack: int
    special_defense: int
    speed: int

    created_at: datetime
    updated_at: datetime


class CreatedOut(BaseModel):
    created: bool


class DeletedOut(BaseModel):
    deleted: bool
