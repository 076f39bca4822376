from typing import Dict, Optional


class TaskdashError(RuntimeError):
    pass


class ValidationError(TaskdashError):
    """Client-side form rejection; nothing was sent to the server."""

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        summary = "; ".join(f"{field}: {message}" for field, message in self.field_errors.items())
        super().__init__(summary or "invalid input")


class AuthError(TaskdashError):
    pass


class GatewayError(TaskdashError):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StateInconsistencyError(TaskdashError):
    pass
