class RatingError(Exception):
    pass


class IncompletePropertiesError(RatingError):
    """Raised when a part needed for the rating has unset properties."""

    def __init__(self, part: str, missing: list[str]) -> None:
        self.part = part
        self.missing = list(missing)
        super().__init__(
            f"{part} properties are incomplete; not set: {', '.join(self.missing)}"
        )


class GeometryInconsistentError(RatingError):
    """Raised when a derived geometric or flow quantity is non-positive or
    non-finite, which would turn the rest of the calculation into nonsense."""

    def __init__(self, quantity: str, value: float, reason: str = '') -> None:
        self.quantity = quantity
        self.value = value
        msg = f"{quantity} = {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class DegenerateTemperatureDifferenceError(RatingError):
    """Raised when the mean temperature difference or the correction factor
    cannot be determined from the given terminal temperatures."""

    def __init__(self, quantity: str, value: float, reason: str = '') -> None:
        self.quantity = quantity
        self.value = value
        msg = f"{quantity} = {value!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)
