"""Models package for the timecard service.

TimecardRequest / TimecardEntry: decoded request payload (wire names are
camelCase aliases).
"""

from timecard.models.schema import ErrorResponse, TimecardEntry, TimecardRequest

__all__ = [
    "ErrorResponse",
    "TimecardEntry",
    "TimecardRequest",
]
