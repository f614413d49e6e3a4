from __future__ import annotations

from pokemonapi.api.schemas import PokemonOut, PokemonPatch, PokemonUpdate
from pokemonapi.db.models import Pokemon


def pokemon_out(obj: Pokemon) -> PokemonOut:
    return PokemonOut(
        id=obj.id,
        name=obj.name,
        type=obj.type,
        attack=obj.attack,
        defense=obj.defense,
        health=obj.health,
        special_attack=obj.special_attack,
        special_defense=obj.special_defense,
        speed=obj.speed,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


def update_from_patch(pokemon_id: int, payload: PokemonPatch) -> PokemonUpdate:
    return PokemonUpdate(id=pokemon_id, **payload.model_dump(exclude_unset=True))
