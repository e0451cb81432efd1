from enum import Enum
from typing import Union

# Integer ids come from the sequential strategy, string ids from timestamp-random.
ContactId = Union[int, str]


class IdStrategyName(str, Enum):
    SEQUENTIAL = "sequential"
    TIMESTAMP_RANDOM = "timestamp-random"
