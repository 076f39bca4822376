from .errors import (
    TaskdashError,
    ValidationError,
    AuthError,
    GatewayError,
    StateInconsistencyError,
)
from .session import Session, SessionEvent, User
from .task import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    QueryKey,
    Task,
    TaskPage,
    make_query_key,
)
from .validation import ensure_valid_task_form, validate_task_fields, validate_task_form

__all__ = [
    # Errors
    "TaskdashError",
    "ValidationError",
    "AuthError",
    "GatewayError",
    "StateInconsistencyError",
    # Session
    "Session",
    "SessionEvent",
    "User",
    # Tasks
    "Task",
    "TaskPage",
    "QueryKey",
    "make_query_key",
    "TITLE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    # Validation
    "validate_task_fields",
    "validate_task_form",
    "ensure_valid_task_form",
]
