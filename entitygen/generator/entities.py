"""Render entity and enum descriptors into a Python module."""

import logging
from collections.abc import Iterable, Sequence

from jinja2 import Environment, PackageLoader

from . import properties
from .properties import map_type
from .types import EntityDescriptor, EnumDescriptor, PropertyDescriptor
from .util import doc_lines, docstring_lines
from .validation import GenerationError, validate_entity, validate_enum

logger = logging.getLogger(__name__)

DEFAULT_RUNTIME_IMPORT = "entitygen.runtime"

env = Environment(
    loader=PackageLoader("entitygen.generator", "templates"),
    trim_blocks=True,
    lstrip_blocks=True,
    keep_trailing_newline=True,
    line_comment_prefix="%%",
    line_statement_prefix="%",
)

entity_template = env.get_template("entity.py.j2")
enum_template = env.get_template("enum.py.j2")
module_template = env.get_template("module.py.j2")


def _docstring(text: str) -> str:
    lines = docstring_lines(text)
    if len(lines) <= 1:
        return f'"""{"".join(lines)}"""'
    return '"""' + "\n".join(lines) + '\n"""'


def _parameters(entity: EntityDescriptor) -> str:
    params = ["fetcher: Any"]
    params.extend(f"{p.name}: {map_type(p.type)}" for p in entity.constructor_args)
    return ", ".join(params)


def _updatable(entity: EntityDescriptor) -> list[PropertyDescriptor]:
    return [p for p in entity.properties if properties.update_expression(p)]


def render_entity(entity: EntityDescriptor, enums: Iterable[str] | None = None) -> str:
    """Render one entity, and its API view if enabled, to Python source."""
    validate_entity(entity, enums)

    constructor_lines = [
        line for line in (properties.constructor_line(p) for p in entity.properties) if line
    ]
    updatable = _updatable(entity)
    logger.debug(
        "Rendering %s: %d properties, %d updaters",
        entity.name,
        len(entity.properties),
        len(updatable),
    )

    text = entity_template.render(
        entity=entity,
        updatable=updatable,
        fallible=[p for p in entity.properties if p.fallible],
        api_properties=[p for p in entity.properties if p.api],
        constructor_lines=constructor_lines,
        parameters=_parameters(entity),
        docstring=_docstring,
        comment_lines=doc_lines,
        field_declaration=properties.field_declaration,
        getter=properties.getter,
        api_getter=properties.api_getter,
        updater=properties.updater,
        updater_name=properties.updater_name,
    )
    return text.rstrip("\n") + "\n"


def render_enum(enum: EnumDescriptor) -> str:
    """Render an enum with its raw provider codes."""
    validate_enum(enum)
    text = enum_template.render(enum=enum, docstring=_docstring, comment_lines=doc_lines)
    return text.rstrip("\n") + "\n"


def _exports(entities: Sequence[EntityDescriptor], enums: Sequence[EnumDescriptor]) -> list[str]:
    names = [enum.name for enum in enums]
    for entity in entities:
        if entity.public:
            names.append(entity.name)
        if entity.has_api and entity.api_name:
            names.append(entity.api_name)
    return names


def render_module(
    entities: Sequence[EntityDescriptor],
    enums: Sequence[EnumDescriptor] = (),
    runtime_import: str = DEFAULT_RUNTIME_IMPORT,
    comments: Sequence[str] = (),
) -> str:
    """Render enums and entities, in the given order, into one module."""
    seen: set[str] = set()
    for name in [e.name for e in enums] + [e.name for e in entities]:
        if name in seen:
            raise GenerationError(f"{name} is defined more than once")
        seen.add(name)

    enum_names = [enum.name for enum in enums]
    blocks = [render_enum(enum).rstrip("\n") for enum in enums]
    blocks.extend(render_entity(entity, enum_names).rstrip("\n") for entity in entities)

    return module_template.render(
        blocks=blocks,
        exports=_exports(entities, enums),
        runtime_import=runtime_import,
        comments=comments,
    )
