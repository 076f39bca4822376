from .auth_client import AuthClient
from .http_client import ApiHttpClient
from .tasks_client import TasksClient

__all__ = [
    "ApiHttpClient",
    "AuthClient",
    "TasksClient",
]
