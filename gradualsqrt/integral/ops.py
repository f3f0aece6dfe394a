"""Standard rounding and traversal codes, shared by all generators."""

from enum import IntEnum

class RM(IntEnum):
    FLOOR = 0
    ROUND_DOWN = 0
    RTN = 0
    CLOSEST = 1
    ROUND_CLOSEST = 1
    NEAREST = 1

class DIR(IntEnum):
    CHANGING = 0
    BOTH = 0
    ASCENDING = 1
    ASC = 1
    DESCENDING = 2
    DESC = 2
