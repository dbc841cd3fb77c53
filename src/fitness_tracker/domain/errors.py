"""Domain errors raised by the service layer."""


class InvalidArgumentError(ValueError):
    """Raised for malformed input, failed preconditions or broken references."""


class NotFoundError(LookupError):
    """Raised when an operation requires an entity that does not exist."""


class TrainingNotFoundError(NotFoundError):
    """Raised when a training id does not resolve."""

    def __init__(self, training_id: int) -> None:
        super().__init__(f"Training with ID {training_id} not found")
        self.training_id = training_id
