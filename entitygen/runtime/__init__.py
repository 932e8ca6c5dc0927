"""Runtime support imported by generated entity modules."""

from .convert import as_bool as as_bool
from .convert import as_duration as as_duration
from .convert import as_timestamp as as_timestamp
from .enums import DecodeError as DecodeError
from .enums import RawEnum as RawEnum
from .result import Err as Err
from .result import FetchError as FetchError
from .result import FetchFailed as FetchFailed
from .result import Ok as Ok
from .result import Result as Result
from .types import ChannelId as ChannelId
from .types import ConnectionId as ConnectionId
from .types import Permissions as Permissions
from .types import PropertyKey as PropertyKey
from .types import ServerId as ServerId
