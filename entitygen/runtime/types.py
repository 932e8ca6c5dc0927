"""Identifier and handle types shared by generated entities and fetchers."""

from dataclasses import dataclass
from typing import NamedTuple, NewType

ServerId = NewType("ServerId", int)
ChannelId = NewType("ChannelId", int)
ConnectionId = NewType("ConnectionId", int)


@dataclass(frozen=True, slots=True)
class Permissions:
    """Opaque permission handle."""


class PropertyKey(NamedTuple):
    """Selects one property in a fetch call, e.g. ("ChannelProperties", "Name")."""

    namespace: str
    variant: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.variant}"
