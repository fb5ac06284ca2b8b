"""
Error taxonomy for the cultivation journey.

Routes translate these into HTTP responses; the engine never lets a
VerificationServiceError escape to its callers.
"""


class JourneyError(Exception):
    """Base class for journey failures."""


class NotFoundError(JourneyError):
    """A crop, workflow step or journey that does not exist."""


class StepLockedError(JourneyError):
    """Proof submitted for a step beyond the journey's cursor."""

    def __init__(self, step_index: int, current_step_index: int):
        self.step_index = step_index
        self.current_step_index = current_step_index
        super().__init__(
            f"step {step_index} is locked (current step is {current_step_index})"
        )


class VerificationServiceError(JourneyError):
    """The proof verifier was unreachable, timed out or answered garbage."""


class PersistenceError(JourneyError):
    """Journey progress could not be written."""
