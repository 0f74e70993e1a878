from enum import IntEnum


class ExpireBehavior(IntEnum):
    """What happens to a subscriber when their integration subscription lapses."""
    REMOVE_ROLE = 0
    KICK = 1

    @classmethod
    def coerce(cls, value):
        """Return the enum member for known values; unknown values are kept as-is."""
        if value is None:
            return None
        try:
            return cls(value)
        except (ValueError, TypeError):
            return value
