from .models import SimulationResult, TransactionIntent
from .schemas import TRANSACTION_INTENT_SCHEMA, IntentValidationError, validate_intent

__all__ = [
    "IntentValidationError",
    "SimulationResult",
    "TRANSACTION_INTENT_SCHEMA",
    "TransactionIntent",
    "validate_intent",
]
