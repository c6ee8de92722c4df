from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .schemas import IntentValidationError, validate_intent


@dataclass(frozen=True)
class TransactionIntent:
    """A proposed transaction, as described by the caller."""

    to: str
    value: Optional[str] = None
    data: Optional[str] = None
    from_address: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[str] = None

    def __post_init__(self) -> None:
        validate_intent(self.to_dict())

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "TransactionIntent":
        """Build from the camelCase mapping an agent framework passes in."""
        instance = dict(payload) if isinstance(payload, Mapping) else payload
        validate_intent(instance)
        return cls(
            to=instance["to"],
            value=instance.get("value"),
            data=instance.get("data"),
            from_address=instance.get("from"),
            gas=int(instance["gas"]) if instance.get("gas") is not None else None,
            gas_price=instance.get("gasPrice"),
        )

    def to_dict(self) -> dict[str, Any]:
        mapping = {
            "to": self.to,
            "value": self.value,
            "data": self.data,
            "from": self.from_address,
            "gas": self.gas,
            "gasPrice": self.gas_price,
        }
        return {key: value for key, value in mapping.items() if value is not None}


@dataclass(frozen=True)
class SimulationResult:
    status: bool
    gas_used: Optional[int]
    to: str
    value: str
    from_address: str
    state_changes: Any = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def status_label(self) -> str:
        return "Success" if self.status else "Failed"


__all__ = [
    "IntentValidationError",
    "SimulationResult",
    "TransactionIntent",
]
