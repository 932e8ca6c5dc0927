"""Render a single property descriptor into Python source fragments."""

from dataclasses import dataclass
from enum import StrEnum, auto

from .types import (
    DURATION,
    PERMISSIONS,
    RAW_INT32,
    RAW_UINT64,
    TIMESTAMP,
    PropertyDescriptor,
    is_ref_type,
    split_type,
)
from .util import docstring_lines, to_pascal_case

# Used for durations and timestamps when no integer function is registered
DEFAULT_INT_FUNCTION = "get_property_as_int"

NOT_FETCHED = "Err(FetchError.NOT_FETCHED)"
NOT_READY = "Err(FetchError.NOT_READY)"

# Fetch layer expression at construction and at refresh time
FETCHER = "fetcher"
SELF_FETCHER = "self._fetcher"

PRIMITIVE_TYPE_MAP = {
    "bool": "bool",
    "int32": "int",
    "int64": "int",
    "uint16": "int",
    "uint32": "int",
    "uint64": "int",
    "string": "str",
    DURATION: "timedelta",
    TIMESTAMP: "datetime",
    PERMISSIONS: "Permissions",
}


class Strategy(StrEnum):
    """How a property value is obtained, in order of precedence."""

    EXPLICIT = auto()
    ACCESSOR = auto()
    FUNCTION = auto()
    REINTERPRET = auto()
    DURATION = auto()
    TIMESTAMP = auto()
    BOOLEAN = auto()
    EXTERNAL = auto()  # Nothing to evaluate, the value is supplied from outside

    @property
    def fetches(self) -> bool:
        return self not in (Strategy.EXPLICIT, Strategy.EXTERNAL)


@dataclass(frozen=True)
class Resolution:
    strategy: Strategy
    expression: str

    @property
    def is_empty(self) -> bool:
        return not self.expression


_EXTERNAL = Resolution(Strategy.EXTERNAL, "")


def map_type(type_name: str) -> str:
    """Map a semantic type to a Python annotation."""
    head, args = split_type(type_name)
    if head == "optional" and len(args) == 1:
        return f"{map_type(args[0])} | None"
    if head == "list" and len(args) == 1:
        return f"list[{map_type(args[0])}]"
    if head == "map" and len(args) == 2:
        return f"dict[{map_type(args[0])}, {map_type(args[1])}]"
    return PRIMITIVE_TYPE_MAP.get(type_name, type_name)


def _view_type(type_name: str) -> str:
    """Annotation of the read-only view a getter returns."""
    head, args = split_type(type_name)
    if head == "list" and len(args) == 1:
        return f"Sequence[{map_type(args[0])}]"
    if head == "map" and len(args) == 2:
        return f"Mapping[{map_type(args[0])}, {map_type(args[1])}]"
    return map_type(type_name)


def _view_function(type_name: str) -> str | None:
    """Function that turns a stored container into its read-only view."""
    head = split_type(type_name)[0]
    if head == "list":
        return "tuple"
    if head == "map":
        return "MappingProxyType"
    return None


def variant(prop: PropertyDescriptor) -> str:
    return prop.variant if prop.variant is not None else to_pascal_case(prop.name)


def property_key(prop: PropertyDescriptor) -> str:
    return f'PropertyKey("{prop.namespace}", "{variant(prop)}")'


def _call(prop: PropertyDescriptor, function: str, update: bool) -> str:
    fetcher = SELF_FETCHER if update else FETCHER
    args = prop.update_args if update else prop.args
    return f"{fetcher}.{function}({args}{property_key(prop)})"


def _first_function(prop: PropertyDescriptor, *raw_types: str) -> str | None:
    for raw_type in raw_types:
        function = prop.function_for(raw_type)
        if function is not None:
            return function
    return None


def resolve(prop: PropertyDescriptor, update: bool = False) -> Resolution:
    """Resolve the expression computing a property's value.

    The first matching strategy wins: explicit expression, accessor override,
    function table, enum reinterpretation, built-in duration / timestamp /
    boolean handling. Otherwise the value has to be supplied externally.
    """
    if not prop.initialize or (update and not prop.should_update):
        return _EXTERNAL

    explicit = prop.updater if update and prop.updater is not None else prop.initializer
    if explicit is not None:
        return Resolution(Strategy.EXPLICIT, explicit)

    if prop.accessor is not None:
        return Resolution(Strategy.ACCESSOR, _call(prop, prop.accessor, update))

    function = prop.function_for(prop.type)
    if function is not None:
        return Resolution(Strategy.FUNCTION, _call(prop, function, update))

    if prop.type in prop.reinterpretable:
        function = _first_function(prop, RAW_INT32, RAW_UINT64)
        if function is None:
            return _EXTERNAL
        return Resolution(
            Strategy.REINTERPRET, f"{_call(prop, function, update)}.and_then({prop.type}.decode)"
        )

    if prop.type in (DURATION, TIMESTAMP):
        function = _first_function(prop, RAW_UINT64, RAW_INT32) or DEFAULT_INT_FUNCTION
        if prop.type == DURATION:
            return Resolution(Strategy.DURATION, f"{_call(prop, function, update)}.and_then(as_duration)")
        return Resolution(Strategy.TIMESTAMP, f"{_call(prop, function, update)}.and_then(as_timestamp)")

    if prop.type == "bool":
        function = _first_function(prop, RAW_INT32, RAW_UINT64)
        if function is not None:
            return Resolution(Strategy.BOOLEAN, f"{_call(prop, function, update)}.map(as_bool)")

    return _EXTERNAL


def field_declaration(prop: PropertyDescriptor) -> str:
    annotation = map_type(prop.type)
    if prop.fallible:
        annotation = f"Result[{annotation}]"
    return f"{prop.name}: {annotation}"


def getter_name(prop: PropertyDescriptor) -> str:
    return f"get_{prop.name}" if prop.public else f"_get_{prop.name}"


def return_type(prop: PropertyDescriptor) -> str:
    view = _view_type(prop.type)
    return f"Result[{view}]" if prop.fallible else view


def _getter_body(prop: PropertyDescriptor) -> str:
    # Only mutable containers need a read-only view, the rest is immutable
    view = _view_function(prop.type) if is_ref_type(prop.type) else None
    if view is None:
        return f"self.{prop.name}"
    if prop.fallible:
        return f"self.{prop.name}.map({view})"
    return f"{view}(self.{prop.name})"


def _docstring(prop: PropertyDescriptor) -> list[str]:
    lines = [line.strip() for line in docstring_lines(prop.documentation)]
    if not lines:
        return []
    if len(lines) == 1:
        return [f'    """{lines[0]}"""']
    return ['    """' + lines[0], *(f"    {line}" if line else "" for line in lines[1:]), '    """']


def getter(prop: PropertyDescriptor) -> str:
    lines = [f"def {getter_name(prop)}(self) -> {return_type(prop)}:"]
    lines.extend(_docstring(prop))
    lines.append(f"    return {_getter_body(prop)}")
    return "\n".join(lines)


def api_getter(prop: PropertyDescriptor) -> str:
    """Getter on the API view, going through the fallible data handle."""
    if not prop.api:
        return ""
    view = _view_type(prop.type)
    call = f"data.unwrap().{getter_name(prop)}()"
    result = call if prop.fallible else f"Ok({call})"
    lines = [f"def get_{prop.name}(self) -> Result[{view}]:"]
    lines.extend(_docstring(prop))
    lines.extend(
        [
            "    data = self._data()",
            "    if data.is_err():",
            f"        return {NOT_READY}",
            f"    return {result}",
        ]
    )
    return "\n".join(lines)


def updater_name(prop: PropertyDescriptor) -> str:
    return f"update_{prop.name}"


def update_expression(prop: PropertyDescriptor) -> str:
    """The value assigned by the updater, empty if nothing can be refreshed."""
    resolution = resolve(prop, update=True)
    if resolution.is_empty:
        return ""
    if resolution.strategy.fetches and not prop.fallible:
        # A failed refresh keeps the last good value
        return f"{resolution.expression}.unwrap_or(self.{prop.name})"
    return resolution.expression


def updater(prop: PropertyDescriptor) -> str:
    expression = update_expression(prop)
    if not expression:
        return ""
    return f"def {updater_name(prop)}(self) -> None:\n    self.{prop.name} = {expression}"


def initializer(prop: PropertyDescriptor) -> str:
    """The value assigned in new(), empty if the name is already bound."""
    if prop.fallible:
        return NOT_FETCHED
    resolution = resolve(prop)
    if resolution.strategy.fetches:
        return f"{resolution.expression}.unwrap()"
    return resolution.expression


def constructor_line(prop: PropertyDescriptor) -> str:
    expression = initializer(prop)
    if not expression or expression == prop.name:
        return ""
    return f"{prop.name} = {expression}"
