import json
from datetime import datetime, timezone
from typing import Dict, Optional


def iso_timestamp() -> str:
    """UTC timestamp for structured CLI output."""
    return datetime.now(timezone.utc).isoformat()


def structured_response(
    command: str,
    *,
    status: str = "OK",
    message: str = "",
    payload: Optional[Dict] = None,
    exit_code: int = 0,
) -> int:
    """Unified JSON response for every CLI command."""
    body: Dict[str, object] = {
        "command": command,
        "status": status,
        "message": message,
        "timestamp": iso_timestamp(),
        "payload": payload or {},
    }
    print(json.dumps(body, ensure_ascii=False, indent=2))
    return exit_code


def structured_error(command: str, message: str, *, payload: Optional[Dict] = None, status: str = "ERROR") -> int:
    return structured_response(command, status=status, message=message, payload=payload, exit_code=1)


def validation_error(command: str, field_errors: Dict[str, str]) -> int:
    """Form rejected before any request was made."""
    summary = "; ".join(f"{field}: {msg}" for field, msg in field_errors.items())
    return structured_response(
        command,
        status="INVALID",
        message=summary,
        payload={"field_errors": dict(field_errors)},
        exit_code=1,
    )


__all__ = ["iso_timestamp", "structured_response", "structured_error", "validation_error"]
