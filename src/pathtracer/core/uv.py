class UV:
    """
    Represents a 2D surface (texture) coordinate.
    """
    __slots__ = ("u", "v")

    def __init__(self, u: float, v: float):
        self.u = u
        self.v = v

    def wrapped(self) -> "UV":
        """Coordinates folded back into [0, 1) for tiling lookups."""
        return UV(self.u % 1.0, self.v % 1.0)

    def __eq__(self, other) -> bool:
        if not isinstance(other, UV):
            return NotImplemented
        return self.u == other.u and self.v == other.v

    def __repr__(self) -> str:
        return f"UV({self.u}, {self.v})"
