class GradientException(Exception):
    pass


class GradientSpecError(GradientException, ValueError):
    "Raised for invalid gradient input, before any PDF object is written"


class InsufficientStops(GradientSpecError):
    def __init__(self, count: int) -> None:
        super().__init__(f"A gradient must have at least two color stops, got {count}")
        self.count = count


class NonMonotonicOffsets(GradientSpecError):
    def __init__(self, index: int, previous: float, offset: float) -> None:
        super().__init__(
            f"Color stop offsets must be strictly increasing: stop {index} has offset"
            f" {offset} after {previous}"
        )
        self.index = index
        self.previous = previous
        self.offset = offset


class ColorSpaceArityMismatch(GradientSpecError):
    def __init__(self, color_space: str, expected: int, got: int, what: str) -> None:
        super().__init__(
            f"{color_space} colors have {expected} components, but {what} has {got}"
        )
        self.color_space = color_space
        self.expected = expected
        self.got = got


class GradientAlreadyRegistered(GradientSpecError):
    def __init__(self, gradient_id: object) -> None:
        super().__init__(f"A gradient is already registered with id {gradient_id!r}")
        self.gradient_id = gradient_id


class AllocationOrderViolation(GradientException, RuntimeError):
    """
    An object id did not match the id predicted for it.

    This means that some allocation was interleaved in the middle of the
    contiguous run reserved for a gradient: it is a defect in the code building
    the document, not a problem with the gradient itself.
    """
