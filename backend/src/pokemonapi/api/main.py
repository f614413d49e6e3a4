from contextlib import asynccontextmanager
from fastapi import FastAPI

from pokemonapi.core.config import settings
from pokemonapi.core.logging_config import setup_logging
from pokemonapi.db.init_db import init_db
from pokemonapi.api.routers.pokemons import router as pokemons_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    init_db()
    yield


app = FastAPI(title=settings.project_name, lifespan=lifespan)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(pokemons_router)
