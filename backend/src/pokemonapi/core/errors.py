from __future__ import annotations

from typing import Any

from pokemonapi.core.rules.validator import ValidationResult


class PokemonServiceError(Exception):
    """Base error of the pokemon service."""


class ValidationError(PokemonServiceError):
    """Input failed validation; nothing was written to the store."""

    def __init__(self, result: ValidationResult):
        self.result = result
        message = "; ".join(e.message for e in result.errors) or "Validation failed"
        super().__init__(message)

    @property
    def errors(self) -> list[dict[str, Any]]:
        return [{"code": e.code, "message": e.message, **e.meta} for e in self.result.errors]


class InvalidArgumentError(PokemonServiceError):
    """Lookup key is outside the valid domain or does not match a record."""


class PokemonNotFoundError(InvalidArgumentError):
    def __init__(self, pokemon_id: Any):
        self.pokemon_id = pokemon_id
        super().__init__(f"Pokemon {pokemon_id!r} not found")
