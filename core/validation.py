"""Creation/edit form rules for tasks."""

from typing import Any, Dict, Mapping

from .errors import ValidationError
from .task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH


def validate_task_fields(values: Mapping[str, Any]) -> Dict[str, str]:
    """Check only the fields present in values (partial edits)."""
    errors: Dict[str, str] = {}
    if "title" in values:
        title = str(values.get("title") or "")
        if not title.strip():
            errors["title"] = "Title is required"
        elif len(title) > TITLE_MAX_LENGTH:
            errors["title"] = f"Title must be at most {TITLE_MAX_LENGTH} characters"
    description = values.get("description")
    if description is not None and len(str(description)) > DESCRIPTION_MAX_LENGTH:
        errors["description"] = f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
    return errors


def validate_task_form(values: Mapping[str, Any]) -> Dict[str, str]:
    """Return field -> message for every violated rule (empty dict when valid)."""
    full = dict(values)
    full.setdefault("title", "")
    return validate_task_fields(full)


def ensure_valid_task_form(values: Mapping[str, Any]) -> None:
    errors = validate_task_form(values)
    if errors:
        raise ValidationError(errors)


__all__ = ["validate_task_fields", "validate_task_form", "ensure_valid_task_form"]
