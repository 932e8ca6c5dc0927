"""Build the descriptors of every entity kind and write the generated module."""

import logging
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import Any

from entitygen.domain import channel, connection, enums, server

from .entities import DEFAULT_RUNTIME_IMPORT, render_module
from .properties import Strategy, resolve
from .types import EntityDescriptor, PropertyDescriptor
from .validation import GenerationError

logger = logging.getLogger(__name__)

# Emission order of the generated module
ENTITY_KINDS: dict[str, Callable[[], list[EntityDescriptor]]] = {
    "channel": channel.create,
    "connection": connection.create,
    "server": server.create,
}


def _select(kinds: Iterable[str] | None) -> list[str]:
    if not kinds:
        return list(ENTITY_KINDS)
    requested = list(kinds)
    for kind in requested:
        if kind not in ENTITY_KINDS:
            raise GenerationError(f"Unknown entity kind {kind!r}, expected one of {list(ENTITY_KINDS)}")
    # Keep declaration order whatever order the kinds were requested in
    return [kind for kind in ENTITY_KINDS if kind in requested]


def collect(kinds: Iterable[str] | None = None) -> list[tuple[str, list[EntityDescriptor]]]:
    """Build the entity descriptors of the selected kinds, in declaration order."""
    return [(kind, ENTITY_KINDS[kind]()) for kind in _select(kinds)]


def generate(
    kinds: Iterable[str] | None = None,
    runtime_import: str = DEFAULT_RUNTIME_IMPORT,
) -> str:
    """Render the enums and the selected entity kinds into one module."""
    entities: list[EntityDescriptor] = []
    for kind, descriptors in collect(kinds):
        logger.info(
            "%s: %d entities, %d properties",
            kind,
            len(descriptors),
            sum(len(e.properties) for e in descriptors),
        )
        entities.extend(descriptors)

    return render_module(
        entities,
        enums.create(),
        runtime_import=runtime_import,
        comments=[f"Entity kinds: {', '.join(_select(kinds))}"],
    )


def write(
    path: str | Path,
    kinds: Iterable[str] | None = None,
    runtime_import: str = DEFAULT_RUNTIME_IMPORT,
) -> bool:
    """Write the generated module to path.

    The file is left alone when its content is already up to date, so build
    tools watching its modification time do not rebuild needlessly.

    Returns:
        True if the file was written.
    """
    path = Path(path)
    text = generate(kinds, runtime_import)
    if path.exists() and path.read_text(encoding="utf-8") == text:
        logger.info("%s is up to date", path)
        return False

    path.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", path)
    return True


def fetch_strategy(prop: PropertyDescriptor) -> Strategy:
    """The strategy that actually fetches a property.

    Fallible fields start out as a placeholder and are fetched by their
    updater, everything else by its initializer.
    """
    return resolve(prop, update=prop.fallible).strategy


def summarize(entities: Sequence[EntityDescriptor]) -> list[dict[str, Any]]:
    """Describe each entity as plain data for the info command."""
    summary = []
    for entity in entities:
        counts = {strategy: 0 for strategy in Strategy}
        for prop in entity.properties:
            counts[fetch_strategy(prop)] += 1
        summary.append(
            {
                "name": entity.name,
                "api_name": entity.api_name if entity.has_api else None,
                "public": entity.public,
                "properties": len(entity.properties),
                "fallible": sum(1 for p in entity.properties if p.fallible),
                "strategies": {s.value: n for s, n in counts.items() if n},
            }
        )
    return summary
