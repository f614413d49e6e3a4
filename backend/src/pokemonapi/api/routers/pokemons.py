from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from pokemonapi.api.mappers import pokemon_out, update_from_patch
from pokemonapi.api.schemas import CreatedOut, DeletedOut, PokemonCreate, PokemonOut, PokemonPatch
from pokemonapi.core.errors import InvalidArgumentError, PokemonNotFoundError, ValidationError
from pokemonapi.core.services.pokemon_service import PokemonService
from pokemonapi.db.deps import get_db
from pokemonapi.repositories import SqlAlchemyPokemonRepository

router = APIRouter(prefix="/pokemons", tags=["pokemons"])


def get_pokemon_service(db: Session = Depends(get_db)) -> PokemonService:
    return PokemonService(SqlAlchemyPokemonRepository(db))


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=422, detail=exc.errors)
    if isinstance(exc, PokemonNotFoundError):
        return HTTPException(status_code=404, detail="Pokemon not found")
    return HTTPException(status_code=400, detail=str(exc))


@router.get("", response_model=list[PokemonOut])
def list_pokemons(service: PokemonService = Depends(get_pokemon_service)):
    return [pokemon_out(p) for p in service.get_all()]


@router.post("", response_model=CreatedOut, status_code=201)
def create_pokemon(
    payload: PokemonCreate, service: PokemonService = Depends(get_pokemon_service)
):
    try:
        return CreatedOut(created=service.create(payload))
    except ValidationError as e:
        raise _http_error(e)


@router.get("/{pokemon_id}", response_model=PokemonOut)
def get_pokemon(pokemon_id: int, service: PokemonService = Depends(get_pokemon_service)):
    try:
        return pokemon_out(service.get_by_id(pokemon_id))
    except InvalidArgumentError as e:
        raise _http_error(e)


def _update(pokemon_id: int, payload: PokemonPatch, service: PokemonService) -> PokemonOut:
    try:
        return pokemon_out(service.update(update_from_patch(pokemon_id, payload)))
    except (ValidationError, InvalidArgumentError) as e:
        raise _http_error(e)


@router.patch("/{pokemon_id}", response_model=PokemonOut)
def patch_pokemon(
    pokemon_id: int,
    payload: PokemonPatch,
    service: PokemonService = Depends(get_pokemon_service),
):
    return _update(pokemon_id, payload, service)


@router.put("/{pokemon_id}", response_model=PokemonOut)
def update_pokemon(
    pokemon_id: int,
    payload: PokemonPatch,
    service: PokemonService = Depends(get_pokemon_service),
):
    return _update(pokemon_id, payload, service)


@router.delete("/{pokemon_id}", response_model=DeletedOut)
def delete_pokemon(pokemon_id: int, service: PokemonService = Depends(get_pokemon_service)):
    try:
        return DeletedOut(deleted=service.delete(pokemon_id))
    except InvalidArgumentError as e:
        raise _http_error(e)
