"""Descriptors of the channel, connection and server entities."""

from . import channel as channel
from . import connection as connection
from . import enums as enums
from . import server as server
