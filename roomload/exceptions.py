class ComputationError(Exception):
    """Base class of the errors raised by the load calculation engine.

    Attribute `field` holds the (dotted) name of the input field that is
    implicated, so that the caller can ask the user to correct it.
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class InvalidPreconditionError(ComputationError):
    """A quantity that the calculation cannot do without is zero or missing
    (e.g. the design airflow of the air-handling system).
    """

    def __init__(self, field: str, message: str = "value is required and cannot be zero"):
        super().__init__(field, message)


class OutOfRangeError(ComputationError, ValueError):
    """An input lies outside its physically plausible range."""

    def __init__(self, field: str, value: float, reason: str):
        super().__init__(field, f"{value!r} is out of range ({reason})")
        self.value = value
        self.reason = reason


class ConvergenceWarning(Warning):
    """Warning for when the maximum number of iterations has been reached
    while solving for the apparatus dew point of a cooling coil.
    """
    pass
