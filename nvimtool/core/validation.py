"""Request Validation - the single input gate in front of the command table."""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from nvimtool.core.errors import SchemaViolation
from nvimtool.models.contracts import ToolRequest
from nvimtool.tool_utils.logging_config import get_logger

logger = get_logger(__name__)


def _first_violation(exc: ValidationError) -> SchemaViolation:
    """Reduce a pydantic error to one SchemaViolation naming the field."""
    error = exc.errors()[0]
    loc = error.get("loc") or ("request",)
    field = str(loc[0])

    if error.get("type") == "extra_forbidden":
        return SchemaViolation(field, "field is not allowed")

    return SchemaViolation(field, error.get("msg", "invalid value"))


def validate_request(raw: Any) -> ToolRequest:
    """Validate a raw request object.

    Args:
        raw: Mapping with `action` and optionally `subAction` and `target`.
            An already validated ToolRequest is returned as is.

    Returns:
        The request as a ToolRequest, values unchanged.

    Raises:
        SchemaViolation: Unknown action, wrong field types, or undeclared fields.
    """
    if isinstance(raw, ToolRequest):
        return raw

    if not isinstance(raw, Mapping):
        raise SchemaViolation(
            "request", f"expected an object, got {type(raw).__name__}"
        )

    try:
        return ToolRequest.model_validate(dict(raw))
    except ValidationError as e:
        violation = _first_violation(e)
        logger.warning(f"Rejected request: {violation.message}")
        raise violation from e
