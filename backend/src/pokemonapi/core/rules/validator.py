from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from pokemonapi.api.schemas import PokemonCreate, PokemonUpdate
from pokemonapi.db.models import NAME_MAX_LENGTH, STAT_FIELDS

PokemonInput = Union[PokemonCreate, PokemonUpdate]


@dataclass
class FieldError:
    code: str
    message: str
    meta: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    ok: bool
    errors: List[FieldError] = field(default_factory=list)

    @property
    def codes(self) -> List[str]:
        return [e.code for e in self.errors]


def _err(code: str, message: str, **meta: Any) -> FieldError:
    return FieldError(code=code, message=message, meta=meta)


def _validate_name(name: str | None) -> List[FieldError]:
    # None: поле не передано (частичный update)
    if name is None:
        return []
    if not name.strip():
        return [_err("NAME_BLANK", "Name must not be blank")]
    if len(name) > NAME_MAX_LENGTH:
        return [
            _err(
                "NAME_TOO_LONG",
                f"Name must be at most {NAME_MAX_LENGTH} characters",
                length=len(name),
                max_length=NAME_MAX_LENGTH,
            )
        ]
    return []


def _validate_stats(data: PokemonInput) -> List[FieldError]:
    errors: List[FieldError] = []
    for stat in STAT_FIELDS:
        value = getattr(data, stat, None)
        if value is not None and value < 0:
            errors.append(
                _err("NEGATIVE_STAT", f"{stat} must not be negative", field=stat, value=value)
            )
    return errors


def validate_pokemon(data: PokemonInput) -> ValidationResult:
    errors = _validate_name(data.name) + _validate_stats(data)
    return ValidationResult(ok=not errors, errors=errors)
