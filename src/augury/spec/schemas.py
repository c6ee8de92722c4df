from __future__ import annotations

from typing import Any

import jsonschema
from jsonschema import FormatChecker

# Mirrors the action's input schema as seen by the agent framework
TRANSACTION_INTENT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "SimulateTransaction",
    "type": "object",
    "properties": {
        "to": {
            "type": "string",
            "minLength": 1,
            "description": "The destination address of the transaction",
        },
        "value": {
            "type": "string",
            "pattern": "^(0[xX][0-9a-fA-F]+|[0-9]+)$",
            "description": "The amount of native tokens to send",
        },
        "data": {
            "type": "string",
            "pattern": "^(0[xX])?([0-9a-fA-F]{2})*$",
            "description": "The transaction data",
        },
        "from": {
            "type": "string",
            "minLength": 1,
            "description": "The sender address",
        },
        "gas": {
            "type": "integer",
            "minimum": 0,
            "description": "Gas limit for the transaction",
        },
        "gasPrice": {
            "type": "string",
            "pattern": "^[0-9]+$",
            "description": "Gas price for the transaction",
        },
    },
    "required": ["to"],
    "additionalProperties": False,
}


class IntentValidationError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []

    def __str__(self) -> str:
        if not self.errors:
            return super().__str__()
        return f"{super().__str__()} {'; '.join(self.errors)}"


def intent_validator() -> jsonschema.Validator:
    validator_cls = jsonschema.validators.validator_for(TRANSACTION_INTENT_SCHEMA)
    validator_cls.check_schema(TRANSACTION_INTENT_SCHEMA)
    return validator_cls(TRANSACTION_INTENT_SCHEMA, format_checker=FormatChecker())


def validate_intent(instance: Any) -> None:
    """
    Validate a camelCase transaction mapping.

    Raises:
        IntentValidationError: With one formatted message per violation
    """
    errors = sorted(intent_validator().iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        raise IntentValidationError(
            "Invalid transaction input.",
            errors=[_format_error(err) for err in errors],
        )


def _format_error(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(part) for part in error.path) or "<root>"
    return f"{location}: {error.message}"
