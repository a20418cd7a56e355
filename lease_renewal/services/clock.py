"""Host-owned block clock."""


class BlockClock:
    """
    Monotonically increasing block counter.

    The renewal engine only reads the current height; the host that owns
    the clock is the only party that advances it.
    """

    def __init__(self, height: int = 0):
        if height < 0:
            raise ValueError("Block height cannot be negative")
        self._height = height

    @property
    def height(self) -> int:
        return self._height

    def advance(self, blocks: int = 1) -> int:
        """
        Advance the clock and return the new height.

        Raises:
            ValueError: If blocks is negative
        """
        if blocks < 0:
            raise ValueError("Block clock cannot move backwards")
        self._height += blocks
        return self._height
