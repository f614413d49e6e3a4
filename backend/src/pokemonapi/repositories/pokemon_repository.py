from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from pokemonapi.db.models import Pokemon

logger = logging.getLogger(__name__)

# верхняя граница INTEGER в SQLite / BIGINT
MAX_STORED_ID = 2**63 - 1


class PokemonRepository(ABC):
    """Storage operations the pokemon service relies on."""

    @abstractmethod
    def add(self, pokemon: Pokemon) -> Pokemon: ...

    @abstractmethod
    def get(self, pokemon_id: int) -> Optional[Pokemon]: ...

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Pokemon]: ...

    @abstractmethod
    def get_all(self) -> List[Pokemon]: ...

    @abstractmethod
    def remove(self, pokemon: Pokemon) -> None: ...

    @abstractmethod
    def commit(self) -> None: ...

    @abstractmethod
    def rollback(self) -> None: ...

    @abstractmethod
    def refresh(self, pokemon: Pokemon) -> None: ...


class SqlAlchemyPokemonRepository(PokemonRepository):
    def __init__(self, session: Session) -> None:
        if session is None:
            raise ValueError("Session cannot be None")
        self.session = session

    def add(self, pokemon: Pokemon) -> Pokemon:
        self.session.add(pokemon)
        return pokemon

    def get(self, pokemon_id: int) -> Optional[Pokemon]:
        # такой id хранилище выдать не могло
        if pokemon_id > MAX_STORED_ID:
            return None
        return self.session.get(Pokemon, pokemon_id)

    def get_by_name(self, name: str) -> Optional[Pokemon]:
        # имя не уникально, берём самую раннюю запись
        stmt = select(Pokemon).where(Pokemon.name == name).order_by(Pokemon.id).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_all(self) -> List[Pokemon]:
        stmt = select(Pokemon).order_by(Pokemon.id)
        return list(self.session.execute(stmt).scalars().all())

    def remove(self, pokemon: Pokemon) -> None:
        self.session.delete(pokemon)

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        logger.debug("Rolling back pokemon session")
        self.session.rollback()

    def refresh(self, pokemon: Pokemon) -> None:
        self.session.refresh(pokemon)
