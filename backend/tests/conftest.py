from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pokemonapi.api.main import app
from pokemonapi.api.schemas import PokemonCreate
from pokemonapi.core.services.pokemon_service import PokemonService
from pokemonapi.db.base import Base
from pokemonapi.db.models import Pokemon, PokemonType
from pokemonapi.repositories import SqlAlchemyPokemonRepository
import pokemonapi.db.session as db_session
import pokemonapi.db.init_db as db_init
from pokemonapi.db.deps import get_db


@pytest.fixture(scope="session")
def engine():
    # SQLite in-memory (один коннект на всю сессию тестов)
    eng = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    return eng


@pytest.fixture(scope="session")
def TestingSessionLocal(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


@pytest.fixture(scope="session", autouse=True)
def _patch_db(engine, TestingSessionLocal):
    # патчим "боевые" engine/SessionLocal на тестовые
    db_session.engine = engine
    db_session.SessionLocal = TestingSessionLocal

    db_init.engine = engine
    yield


@pytest.fixture(autouse=True)
def _schema(engine):
    # чистая схема на каждый тест
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db(TestingSessionLocal):
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def repo(db):
    return SqlAlchemyPokemonRepository(db)


@pytest.fixture()
def service(repo):
    return PokemonService(repo)


@pytest.fixture()
def charmander_dto():
    return PokemonCreate(
        name="Charmander",
        type=PokemonType.FIRE,
        attack=15,
        defense=10,
        health=15,
        special_attack=15,
        special_defense=5,
        speed=15,
    )


@pytest.fixture()
def make_charmander():
    def _make() -> Pokemon:
        return Pokemon(
            name="Charmander",
            type=PokemonType.FIRE,
            attack=15,
            defense=10,
            health=15,
            special_attack=15,
            special_defense=5,
            speed=15,
        )

    return _make


@pytest.fixture()
def client(TestingSessionLocal):
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
