"""Prototype-style builders for property, entity and enum descriptors.

Every setter returns a new builder and leaves the receiver untouched, so a
shared base can be specialised many times:

    base = PropertyBuilder.new().namespace("ChannelProperties").functions(fns)
    text = base.type("string")
    name = text.name("name").finalize()
    topic = text.name("topic").finalize()
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Self

from .types import (
    EntityDescriptor,
    EnumDescriptor,
    EnumValue,
    Parameter,
    PropertyDescriptor,
)


@dataclass(frozen=True)
class PropertyBuilder:
    _name: str = ""
    _type: str = ""
    _fallible: bool = False
    _documentation: str = ""
    _initialize: bool = False
    _initializer: str | None = None
    _updater: str | None = None
    _should_update: bool = False
    _accessor: str | None = None
    _namespace: str = ""
    _variant: str | None = None
    _functions: tuple[tuple[str, str], ...] = ()
    _reinterpretable: tuple[str, ...] = ()
    _args: str = ""
    _update_args: str = ""
    _api: bool = False
    _public: bool = False

    @classmethod
    def new(cls) -> Self:
        """A builder with the defaults of a fetched, refreshable field."""
        return cls(
            _fallible=True,
            _initialize=True,
            _should_update=True,
            _api=True,
            _public=True,
        )

    def name(self, name: str) -> Self:
        return replace(self, _name=name)

    def type(self, type_name: str) -> Self:
        return replace(self, _type=type_name)

    def fallible(self, fallible: bool) -> Self:
        return replace(self, _fallible=fallible)

    def documentation(self, documentation: str) -> Self:
        return replace(self, _documentation=documentation)

    def initialize(self, initialize: bool) -> Self:
        return replace(self, _initialize=initialize)

    def initializer(self, initializer: str) -> Self:
        return replace(self, _initializer=initializer)

    def updater(self, updater: str) -> Self:
        return replace(self, _updater=updater)

    def should_update(self, should_update: bool) -> Self:
        return replace(self, _should_update=should_update)

    def accessor(self, accessor: str) -> Self:
        return replace(self, _accessor=accessor)

    def namespace(self, namespace: str) -> Self:
        return replace(self, _namespace=namespace)

    def variant(self, variant: str) -> Self:
        return replace(self, _variant=variant)

    def functions(self, functions: Mapping[str, str]) -> Self:
        return replace(self, _functions=tuple(functions.items()))

    def reinterpretable(self, types: Iterable[str]) -> Self:
        return replace(self, _reinterpretable=tuple(types))

    def args(self, args: str) -> Self:
        return replace(self, _args=args)

    def update_args(self, update_args: str) -> Self:
        return replace(self, _update_args=update_args)

    def api(self, api: bool) -> Self:
        return replace(self, _api=api)

    def public(self, public: bool) -> Self:
        return replace(self, _public=public)

    def finalize(self) -> PropertyDescriptor:
        return PropertyDescriptor(
            name=self._name,
            type=self._type,
            fallible=self._fallible,
            documentation=self._documentation,
            initialize=self._initialize,
            initializer=self._initializer,
            updater=self._updater,
            should_update=self._should_update,
            accessor=self._accessor,
            namespace=self._namespace,
            variant=self._variant,
            functions=self._functions,
            reinterpretable=self._reinterpretable,
            args=self._args,
            update_args=self._update_args,
            api=self._api,
            public=self._public,
        )


@dataclass(frozen=True)
class EntityBuilder:
    _name: str = ""
    _api_name: str | None = None
    _documentation: str = ""
    _properties: tuple[PropertyDescriptor, ...] = ()
    _extra_attributes: str = ""
    _extra_methods: str = ""
    _extra_initialization: str = ""
    _extra_creation: str = ""
    _constructor_args: tuple[Parameter, ...] = ()
    _public: bool = False
    _with_accessors: bool = False
    _with_api: bool = False
    _with_update: bool = False
    _with_constructor: bool = False

    @classmethod
    def new(cls) -> Self:
        """A public entity with everything but the API view enabled."""
        return cls(
            _public=True,
            _with_accessors=True,
            _with_update=True,
            _with_constructor=True,
        )

    def name(self, name: str) -> Self:
        return replace(self, _name=name)

    def api_name(self, api_name: str) -> Self:
        return replace(self, _api_name=api_name)

    def documentation(self, documentation: str) -> Self:
        return replace(self, _documentation=documentation)

    def properties(self, properties: Iterable[PropertyDescriptor]) -> Self:
        return replace(self, _properties=tuple(properties))

    def extra_attributes(self, extra_attributes: str) -> Self:
        return replace(self, _extra_attributes=extra_attributes)

    def extra_methods(self, extra_methods: str) -> Self:
        return replace(self, _extra_methods=extra_methods)

    def extra_initialization(self, extra_initialization: str) -> Self:
        return replace(self, _extra_initialization=extra_initialization)

    def extra_creation(self, extra_creation: str) -> Self:
        return replace(self, _extra_creation=extra_creation)

    def constructor_args(self, *args: tuple[str, str]) -> Self:
        """Set the constructor parameters as (name, type) pairs."""
        return replace(self, _constructor_args=tuple(Parameter(n, t) for n, t in args))

    def public(self, public: bool) -> Self:
        return replace(self, _public=public)

    def with_accessors(self, with_accessors: bool) -> Self:
        return replace(self, _with_accessors=with_accessors)

    def with_api(self, with_api: bool) -> Self:
        return replace(self, _with_api=with_api)

    def with_update(self, with_update: bool) -> Self:
        return replace(self, _with_update=with_update)

    def with_constructor(self, with_constructor: bool) -> Self:
        return replace(self, _with_constructor=with_constructor)

    def finalize(self) -> EntityDescriptor:
        return EntityDescriptor(
            name=self._name,
            api_name=self._api_name,
            documentation=self._documentation,
            properties=self._properties,
            extra_attributes=self._extra_attributes,
            extra_methods=self._extra_methods,
            extra_initialization=self._extra_initialization,
            extra_creation=self._extra_creation,
            constructor_args=self._constructor_args,
            public=self._public,
            with_accessors=self._with_accessors,
            with_api=self._with_api,
            with_update=self._with_update,
            with_constructor=self._with_constructor,
        )


@dataclass(frozen=True)
class EnumBuilder:
    _name: str = ""
    _documentation: str = ""
    _values: tuple[EnumValue, ...] = ()

    def name(self, name: str) -> Self:
        return replace(self, _name=name)

    def documentation(self, documentation: str) -> Self:
        return replace(self, _documentation=documentation)

    def value(self, name: str, code: int, documentation: str = "") -> Self:
        """Append one member; members keep the order they were added in."""
        return replace(self, _values=(*self._values, EnumValue(name, code, documentation)))

    def finalize(self) -> EnumDescriptor:
        return EnumDescriptor(name=self._name, documentation=self._documentation, values=self._values)
