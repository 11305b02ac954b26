import enum


class Truth(enum.Enum):
    """ The three-valued truth of a literal or clause under a partial
    assignment.

    UNKNOWN means the assignment does not determine the value yet. It is
    never conflated with FALSE: a clause holding an UNKNOWN literal is
    UNKNOWN itself, and only TRUE counts as satisfied.
    """
    TRUE = "true"
    FALSE = "false"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value):
        """ Convert an optional bool (None meaning undetermined). """
        if value is None:
            return cls.UNKNOWN
        return cls.TRUE if value else cls.FALSE

    @property
    def is_known(self):
        return self is not Truth.UNKNOWN

    def negate(self):
        if self is Truth.TRUE:
            return Truth.FALSE
        elif self is Truth.FALSE:
            return Truth.TRUE
        return self

    def __str__(self):
        return self.value
