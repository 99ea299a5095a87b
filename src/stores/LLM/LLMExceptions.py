class GenerationFailure(Exception):
    """The hosted model call did not produce a usable response."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out


class SchemaValidationFailure(GenerationFailure):
    """The model answered, but its output does not match the expected schema."""
