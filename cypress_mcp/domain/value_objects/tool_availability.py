from enum import Enum


class ToolAvailability(str, Enum):
    UNCHECKED = "unchecked"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
