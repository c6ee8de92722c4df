from __future__ import annotations

import json

from ..spec.models import SimulationResult

ERROR_PREFIX = "Error simulating transaction"


def render_result(result: SimulationResult) -> str:
    state_changes = json.dumps(result.state_changes, indent=2, default=str)
    lines = [
        "Simulation Results:",
        f"Status: {result.status_label}",
        f"Gas Used: {result.gas_used}",
        f"Transaction to: {result.to}",
        f"Value: {result.value}",
        f"From: {result.from_address}",
        f"State Changes: {state_changes}",
    ]
    return "\n".join(lines)


def render_error(error: BaseException | str) -> str:
    return f"{ERROR_PREFIX}: {error}"


def is_error_report(text: str) -> bool:
    return text.startswith(f"{ERROR_PREFIX}:")
