from enum import Flag


class BoundKind(Flag):
    """Which endpoints of an interval are excluded from it.

    The two axes are independent, giving four shapes::

        CLOSED      [a, b]
        LEFT_OPEN   (a, b]
        RIGHT_OPEN  [a, b)
        OPEN        (a, b)
    """

    CLOSED = 0
    LEFT_OPEN = 1
    RIGHT_OPEN = 2
    OPEN = LEFT_OPEN | RIGHT_OPEN

    @classmethod
    def of(cls, a_open: bool, b_open: bool) -> "BoundKind":
        kind = cls.CLOSED
        if a_open:
            kind |= cls.LEFT_OPEN
        if b_open:
            kind |= cls.RIGHT_OPEN
        return kind

    @property
    def left_open(self) -> bool:
        return BoundKind.LEFT_OPEN in self

    @property
    def right_open(self) -> bool:
        return BoundKind.RIGHT_OPEN in self

    @property
    def brackets(self) -> tuple[str, str]:
        """Bracket characters for bracket notation, e.g. ``("[", ")")``."""
        return ("(" if self.left_open else "[", ")" if self.right_open else "]")
