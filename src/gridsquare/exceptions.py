"""Custom exception hierarchy for gridsquare."""


class GridSquareError(Exception):
    """Base exception for all gridsquare errors."""


class GridReferenceInvalid(GridSquareError):
    """The provided string is not a valid OS grid reference."""

    def __init__(self, grid_ref: str):
        self.grid_ref = grid_ref
        super().__init__(f"Invalid OS grid reference: '{grid_ref}'")


class UnknownRegion(GridSquareError):
    """No preset region exists with the requested id."""

    def __init__(self, region_id: str, known: list[str]):
        self.region_id = region_id
        self.known = known
        super().__init__(
            f"Unknown region '{region_id}' (expected one of: {', '.join(known)})"
        )


class InsufficientPoints(GridSquareError):
    """Too few points were supplied to build a polygon."""

    def __init__(self, count: int, required: int = 3):
        self.count = count
        self.required = required
        super().__init__(
            f"Need at least {required} points to build a boundary, got {count}"
        )
