from .pokemon_repository import PokemonRepository, SqlAlchemyPokemonRepository

__all__ = [
    "PokemonRepository",
    "SqlAlchemyPokemonRepository",
]
