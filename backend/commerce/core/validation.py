"""Validation Stage - checks a raw payload against a Pydantic schema before any domain work.

Invariants:
    - check_payload is PURE: same input, same output, no logging, no IO
    - Every failing field yields its own violation; nothing short-circuits after the first
    - Success returns the normalized model (declared types, unknown fields dropped)
    - Violation messages name the field (by its wire alias) and the broken constraint in words

Design Decisions:
    - Pydantic schemas as the field schema: type, required-ness and numeric
      constraints are declared once on the model, reused for OpenAPI docs
    - Strict field types on schemas: "150" is not a number, True is not a number
    - Messages rewritten from Pydantic error types: clients see stable wording
      ("must be a positive number"), not library-version-dependent text
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from commerce.core.errors import PayloadValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_NUMBER_TYPES = frozenset({
    "float_type", "float_parsing", "decimal_type", "decimal_parsing",
    "finite_number",
})
_INTEGER_TYPES = frozenset({"int_type", "int_parsing", "int_from_float"})


def check_payload(
    schema: type[SchemaT], payload: Any,
) -> tuple[SchemaT | None, list[dict[str, str]]]:
    """Validate payload. Returns (model, []) on success, (None, violations) on failure."""
    try:
        return schema.model_validate(payload), []
    except ValidationError as exc:
        return None, describe_violations(exc.errors())


def validate_payload(schema: type[SchemaT], payload: Any) -> SchemaT:
    """check_payload, raising PayloadValidationError (400) on any violation."""
    model, violations = check_payload(schema, payload)
    if violations:
        raise PayloadValidationError(violations)
    return model


def describe_violations(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Map Pydantic error dicts to [{"field", "message"}], one per error."""
    return [
        {"field": _field_name(e), "message": _describe(e)}
        for e in errors
    ]


def _field_name(error: dict[str, Any]) -> str:
    if error.get("type") == "json_invalid":
        return "body"
    loc = [str(part) for part in error.get("loc", ()) if part != "body"]
    return ".".join(loc) or "body"


def _describe(error: dict[str, Any]) -> str:
    field = _field_name(error)
    kind = error.get("type", "")
    ctx = error.get("ctx") or {}

    if kind == "json_invalid":
        return "Request body must be valid JSON"
    if field == "body" and kind in ("model_type", "model_attributes_type", "dict_type"):
        return "Request body must be a JSON object"
    if kind == "missing":
        return f'"{field}" is required'
    if kind == "string_type":
        return f'"{field}" must be a string'
    if kind == "string_too_short":
        return f'"{field}" is not allowed to be empty'
    if kind in _NUMBER_TYPES:
        return f'"{field}" must be a number'
    if kind in _INTEGER_TYPES:
        value = error.get("input")
        if isinstance(value, float):
            return f'"{field}" must be an integer'
        return f'"{field}" must be a number'
    if kind == "greater_than":
        if ctx.get("gt") == 0:
            return f'"{field}" must be a positive number'
        return f'"{field}" must be greater than {ctx.get("gt")}'
    if kind == "greater_than_equal":
        return f'"{field}" must be greater than or equal to {ctx.get("ge")}'
    if kind == "money_precision":
        return f'"{field}" must have at most 2 decimal places'
    if kind == "money_too_large":
        return f'"{field}" must be less than {ctx.get("limit")}'
    if kind == "email_invalid":
        return f'"{field}" must be a valid email'
    return f'"{field}" {error.get("msg", "is invalid")}'
