from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from ..models.Token import MAX_EXPIRES_IN_MINUTES, CreateTokenInput

# (field, pydantic error type) -> message shown to the client
ERROR_MESSAGES = {
    ("userId", "string_too_short"): "userId is required",
    ("userId", "string_type"): "Expected string",
    ("scopes", "too_short"): "At least one scope is required",
    ("scopes", "list_type"): "Expected array",
    ("scopes", "string_type"): "Expected string",
    ("expiresInMinutes", "int_type"): "expiresInMinutes must be an integer",
    ("expiresInMinutes", "greater_than"): "expiresInMinutes must be positive",
    ("expiresInMinutes", "less_than_equal"): f"expiresInMinutes must be at most {MAX_EXPIRES_IN_MINUTES}",
}


@dataclass(frozen=True)
class ValidationResult:
    value: CreateTokenInput | None = None
    field_errors: dict[str, list[str]] = field(default_factory=dict)
    form_errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None

    def flatten(self) -> dict:
        return {"formErrors": list(self.form_errors), "fieldErrors": dict(self.field_errors)}


def _message_for(field_name: str, error: dict) -> str:
    if error["type"] == "missing":
        return "Required"
    return ERROR_MESSAGES.get((field_name, error["type"]), error["msg"])


def validate_create_token_input(raw: Any) -> ValidationResult:
    """
    Checks a create-token payload.
    Never raises: failures come back as per-field messages on the result.
    """
    if not isinstance(raw, dict):
        return ValidationResult(form_errors=["Expected object"])

    try:
        value = CreateTokenInput.model_validate(raw)
    except ValidationError as exc:
        field_errors: dict[str, list[str]] = {}
        form_errors: list[str] = []
        for error in exc.errors():
            if not error["loc"]:
                form_errors.append(error["msg"])
                continue
            field_name = str(error["loc"][0])
            field_errors.setdefault(field_name, []).append(_message_for(field_name, error))
        return ValidationResult(field_errors=field_errors, form_errors=form_errors)

    return ValidationResult(value=value)
