"""
Typed errors raised by the progress core.

All of them are local and recoverable; the web layer maps `code` to an HTTP status.
"""


class ProgressError(Exception):
    code = "progress_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmount(ProgressError):
    """Non-positive XP submitted."""

    code = "invalid_amount"


class AlreadyCompleted(ProgressError):
    """Module completion submitted twice for the same learner."""

    code = "already_completed"

    def __init__(self, module_id: str):
        super().__init__(f"Module {module_id} already completed")
        self.module_id = module_id


class NotFound(ProgressError):
    code = "not_found"


class InvalidArgument(ProgressError):
    code = "invalid_argument"
