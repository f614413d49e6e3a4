from __future__ import annotations

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError

from pokemonapi.api.schemas import PokemonCreate, PokemonUpdate
from pokemonapi.core.errors import InvalidArgumentError, PokemonNotFoundError, ValidationError
from pokemonapi.core.rules.validator import PokemonInput, validate_pokemon
from pokemonapi.db.models import STAT_FIELDS, Pokemon
from pokemonapi.repositories import PokemonRepository

logger = logging.getLogger(__name__)


class PokemonService:
    """
    CRUD над покемонами.

    Валидация идёт до любого обращения к хранилищу: невалидный ввод
    поднимает ValidationError и ничего не пишет. Ошибки самого
    хранилища пробрасываются как есть (после rollback).
    """

    def __init__(self, repo: PokemonRepository) -> None:
        if repo is None:
            raise ValueError("PokemonRepository cannot be None")
        self.repo = repo

    def create(self, data: PokemonCreate) -> bool:
        self._ensure_valid(data)

        pokemon = Pokemon(
            name=data.name,
            type=data.type,
            **{stat: getattr(data, stat) for stat in STAT_FIELDS},
        )
        self.repo.add(pokemon)
        self._commit()
        logger.info("Created pokemon %s (id=%s)", pokemon.name, pokemon.id)
        return True

    def get_by_id(self, pokemon_id: int) -> Pokemon:
        _check_id(pokemon_id)
        pokemon = self.repo.get(pokemon_id)
        if pokemon is None:
            raise PokemonNotFoundError(pokemon_id)
        return pokemon

    def get_all(self) -> List[Pokemon]:
        return self.repo.get_all()

    def update(self, data: PokemonUpdate) -> Pokemon:
        self._ensure_valid(data)

        pokemon = self._locate(data)

        # name меняем только при поиске по id, иначе name и есть ключ
        if data.id is not None and data.name is not None:
            pokemon.name = data.name
        if data.type is not None:
            pokemon.type = data.type
        for stat in STAT_FIELDS:
            value = getattr(data, stat)
            if value is not None:
                setattr(pokemon, stat, value)

        self._commit()
        self.repo.refresh(pokemon)
        logger.info("Updated pokemon id=%s", pokemon.id)
        return pokemon

    def delete(self, pokemon_id: int) -> bool:
        _check_id(pokemon_id)
        pokemon = self.repo.get(pokemon_id)
        if pokemon is None:
            logger.debug("Pokemon id=%s not found for deletion", pokemon_id)
            return False

        self.repo.remove(pokemon)
        self._commit()
        logger.info("Deleted pokemon id=%s", pokemon_id)
        return True

    # ---- helpers ----

    def _ensure_valid(self, data: PokemonInput) -> None:
        result = validate_pokemon(data)
        if not result.ok:
            logger.warning("Pokemon validation failed: %s", result.codes)
            raise ValidationError(result)

    def _locate(self, data: PokemonUpdate) -> Pokemon:
        if data.id is not None:
            return self.get_by_id(data.id)
        if data.name is not None:
            pokemon = self.repo.get_by_name(data.name)
            if pokemon is None:
                raise PokemonNotFoundError(data.name)
            return pokemon
        raise InvalidArgumentError("Update requires either id or name")

    def _commit(self) -> None:
        try:
            self.repo.commit()
        except SQLAlchemyError:
            logger.exception("Commit failed, rolling back")
            self.repo.rollback()
            raise


def _check_id(pokemon_id: int) -> None:
    if pokemon_id < 0:
        raise InvalidArgumentError(f"Pokemon id must not be negative, got {pokemon_id}")
