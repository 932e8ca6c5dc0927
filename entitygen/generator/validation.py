"""Generation-time checks on descriptors.

Anything that would otherwise produce empty or broken code is reported as a
GenerationError naming the offending descriptor.
"""

import keyword
import logging
from collections.abc import Iterable

from .properties import Strategy, resolve
from .types import EntityDescriptor, EnumDescriptor

logger = logging.getLogger(__name__)

# Names taken by the generated class or the new() signature
RESERVED_NAMES = frozenset(["cls", "self", "fetcher", "new", "update", "update_from"])


class GenerationError(RuntimeError):
    """Raised when a descriptor cannot be turned into valid code."""


def _check_identifier(kind: str, name: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise GenerationError(f"{kind} name {name!r} is not a valid identifier")


def validate_enum(enum: EnumDescriptor) -> None:
    """Check that every member maps to its own distinct code."""
    _check_identifier("Enum", enum.name)
    if not enum.values:
        raise GenerationError(f"Enum {enum.name} declares no values")

    names: set[str] = set()
    codes: dict[int, str] = {}
    for value in enum.values:
        _check_identifier(f"{enum.name} value", value.name)
        if value.name in names:
            raise GenerationError(f"{enum.name}.{value.name} is declared twice")
        if value.code in codes:
            raise GenerationError(
                f"{enum.name}.{value.name} reuses code {value.code} of {enum.name}.{codes[value.code]}"
            )
        names.add(value.name)
        codes[value.code] = value.name


def validate_entity(entity: EntityDescriptor, enums: Iterable[str] | None = None) -> None:
    """Check an entity before emission.

    Args:
        entity: The entity to check.
        enums: Names of the enums available to the generated module. When
            given, reinterpreted properties must name one of them.
    """
    _check_identifier("Entity", entity.name)
    if entity.has_api and entity.api_name:
        _check_identifier("API", entity.api_name)
        if not entity.with_accessors:
            raise GenerationError(f"{entity.name} has an API view but no accessors for it to call")

    declared: set[str] = set()
    for param in entity.constructor_args:
        where = f"{entity.name}.new({param.name or '<unnamed>'})"
        _check_identifier(f"Parameter {where}", param.name)
        if param.name in RESERVED_NAMES or param.name.startswith("_"):
            raise GenerationError(f"{where} uses a reserved name")
        if param.name in declared:
            raise GenerationError(f"{where} is declared twice")
        declared.add(param.name)

    known_enums = set(enums) if enums is not None else None
    parameters = entity.parameter_names()
    seen: set[str] = set()

    for prop in entity.properties:
        where = f"{entity.name}.{prop.name or '<unnamed>'}"
        _check_identifier(f"Property {where}", prop.name)
        if not prop.type:
            raise GenerationError(f"{where} has no type")
        if prop.name in RESERVED_NAMES or prop.name.startswith("_"):
            raise GenerationError(f"{where} uses a reserved name")
        if prop.name in seen:
            raise GenerationError(f"{where} is declared twice")
        seen.add(prop.name)

        initial = resolve(prop)
        refresh = resolve(prop, update=True)
        if prop.initialize and not prop.fallible and initial.is_empty and prop.name not in parameters:
            raise GenerationError(
                f"{where} cannot be initialised: no initializer, accessor or fetch function "
                f"for type {prop.type!r}"
            )

        if prop.initialize and prop.fallible and prop.should_update and entity.with_update:
            if refresh.is_empty:
                raise GenerationError(
                    f"{where} is never fetched: no updater, accessor or fetch function "
                    f"for type {prop.type!r}"
                )

        if known_enums is not None and prop.type not in known_enums:
            if Strategy.REINTERPRET in (initial.strategy, refresh.strategy):
                raise GenerationError(f"{where} reinterprets unknown enum {prop.type}")

        logger.debug("%s: init=%s update=%s", where, initial.strategy, refresh.strategy)
