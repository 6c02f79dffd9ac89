"""Combo-related exceptions."""


class ComboError(Exception):
    """Base class for everything raised by trickgraph."""


class ComboValidationError(ComboError):
    """Raised when a list of movement nodes fails validation."""

    code = "INVALID_COMBO"

    def __init__(self, message: str, index: int | None = None):
        self.index = index
        super().__init__(message)


class EmptySequenceError(ComboValidationError):
    """Raised when a combo that must hold movements holds none."""

    code = "EMPTY_COMBO"


class InvalidMovementIdError(ComboValidationError):
    """Raised when a node's movement_id is missing, not a string, or empty."""

    code = "INVALID_MOVEMENT_ID"


class InvalidLandingStanceError(ComboValidationError):
    """Raised when a node's landing_stance is present but not a string."""

    code = "INVALID_LANDING_STANCE"


class MalformedInputError(ComboError):
    """Raised when a stored payload is absent or not shaped like a combo."""

    code = "MALFORMED_INPUT"

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class MalformedGraphError(ComboError):
    """Raised when the transition edges do not form a path over the nodes."""

    def __init__(
        self, message: str, index: int | None = None, code: str = "MALFORMED_GRAPH"
    ):
        self.index = index
        self.code = code
        super().__init__(message)


class ComboLoadError(ComboError):
    """Raised when a combo file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


def flatten_validation_errors(exc) -> list[dict]:
    """Flatten a pydantic ValidationError into ``{"loc", "msg", "type"}`` dicts."""
    return [
        {
            "loc": ".".join(str(part) for part in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
