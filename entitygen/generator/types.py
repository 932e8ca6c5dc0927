"""Descriptor definitions consumed by the entity code generator."""

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin


@dataclass(frozen=True)
class PropertyDescriptor(DataClassJsonMixin):
    """Describes one field of an entity and how to obtain and refresh it.

    The fetch-related attributes are only consulted when no explicit
    initializer or updater is given:
    - accessor: fetch function that overrides the type based lookup
    - functions: ordered (semantic type, fetch function) pairs
    - reinterpretable: types stored as raw integers and decoded into enums
    - args / update_args: argument prefix for construction / refresh calls
    """

    name: str
    type: str
    fallible: bool
    documentation: str
    initialize: bool
    initializer: str | None
    updater: str | None
    should_update: bool
    accessor: str | None
    namespace: str
    variant: str | None
    functions: tuple[tuple[str, str], ...]
    reinterpretable: tuple[str, ...]
    args: str
    update_args: str
    api: bool
    public: bool

    def function_for(self, type_name: str) -> str | None:
        """Return the fetch function registered for a semantic type."""
        for key, function in self.functions:
            if key == type_name:
                return function
        return None


@dataclass(frozen=True)
class Parameter(DataClassJsonMixin):
    """A constructor parameter of a generated entity."""

    name: str
    type: str


@dataclass(frozen=True)
class EntityDescriptor(DataClassJsonMixin):
    """Describes a generated entity type.

    The extra_* blocks are inserted verbatim, in order, at fixed points of the
    generated class: extra_attributes after the fields, extra_methods after
    the accessors, extra_initialization at the start of new(), extra_creation
    as trailing keyword arguments of the instance creation.
    """

    name: str
    api_name: str | None
    documentation: str
    properties: tuple[PropertyDescriptor, ...]
    extra_attributes: str
    extra_methods: str
    extra_initialization: str
    extra_creation: str
    constructor_args: tuple[Parameter, ...]
    public: bool
    with_accessors: bool
    with_api: bool
    with_update: bool
    with_constructor: bool

    @property
    def has_api(self) -> bool:
        return self.with_api and bool(self.api_name)

    def parameter_names(self) -> list[str]:
        return [p.name for p in self.constructor_args]


@dataclass(frozen=True)
class EnumValue(DataClassJsonMixin):
    """A single enum member and its raw provider code."""

    name: str
    code: int
    documentation: str


@dataclass(frozen=True)
class EnumDescriptor(DataClassJsonMixin):
    """An enum whose values travel as raw integers."""

    name: str
    documentation: str
    values: tuple[EnumValue, ...]


# Raw wire types a fetch function can return
RAW_INT32 = "int32"
RAW_UINT64 = "uint64"
RAW_STRING = "string"

DURATION = "duration"
TIMESTAMP = "timestamp"
PERMISSIONS = "permissions"

CONTAINER_TYPES = frozenset(["optional", "list", "map"])


def split_type(type_name: str) -> tuple[str, list[str]]:
    """Split "map<K, optional<V>>" into ("map", ["K", "optional<V>"])."""
    type_name = type_name.strip()
    start = type_name.find("<")
    if start < 0 or not type_name.endswith(">"):
        return type_name, []

    head = type_name[:start].strip()
    inner = type_name[start + 1 : -1]
    args: list[str] = []
    depth = 0
    current = ""
    for char in inner:
        if char == "<":
            depth += 1
        elif char == ">":
            depth -= 1
        if char == "," and depth == 0:
            args.append(current.strip())
            current = ""
        else:
            current += char
    if current.strip():
        args.append(current.strip())
    return head, args


def is_container(type_name: str) -> bool:
    return split_type(type_name)[0] in CONTAINER_TYPES


def is_ref_type(type_name: str) -> bool:
    """Check if a type is held by reference: strings, handles and containers."""
    return type_name in (RAW_STRING, PERMISSIONS) or is_container(type_name)
