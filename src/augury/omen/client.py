"""
Tenderly simulation client.

One pass, no retries:

    resolve sender/network -> build request -> POST /simulate -> interpret

Errors are raised as SimulationError subclasses; converting them into
text is left to the action boundary (see provider.py).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from ..auspex.wallet import WalletProvider
from ..config import ProviderConfig
from ..networks import parse_chain_id
from ..spec.models import SimulationResult, TransactionIntent

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class SimulationError(RuntimeError):
    pass


class TransportFailure(SimulationError):
    pass


class ResponseParseFailure(SimulationError):
    pass


def build_payload(intent: TransactionIntent, from_address: str, network_id: str) -> dict[str, Any]:
    """
    Map an intent onto Tenderly's simulate request body.

    Absent gas / gas_price are left out of the body; explicit values
    (zero included) are sent as given.
    """
    payload: dict[str, Any] = {
        "network_id": network_id,
        "from": from_address,
        "to": intent.to,
        "input": _normalize_input(intent.data),
        "value": intent.value if intent.value is not None else "0x0",
    }
    if intent.gas is not None:
        payload["gas"] = intent.gas
    if intent.gas_price is not None:
        payload["gas_price"] = intent.gas_price
    payload["save"] = True
    return payload


def _normalize_input(data: Optional[str]) -> str:
    if not data or data.lower() == "0x":
        return "0x"
    if data[:2].lower() == "0x":
        return "0x" + data[2:]
    return "0x" + data


class TenderlySimulationClient:
    def __init__(
        self,
        config: ProviderConfig,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.config = config
        self.timeout = timeout
        self._http_client = http_client

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Access-Key": self.config.access_key,
        }

    def build_request(self, intent: TransactionIntent, wallet: WalletProvider) -> dict[str, Any]:
        """Resolve sender and network from the wallet, then build the body."""
        network = wallet.get_network()
        network_id = str(parse_chain_id(network.chain_id))
        from_address = intent.from_address or wallet.get_address()
        return build_payload(intent, from_address=from_address, network_id=network_id)

    def submit(self, payload: dict[str, Any]) -> Any:
        """
        POST the payload to Tenderly and return the decoded JSON body.

        Raises:
            TransportFailure: On network errors or a non-2xx status
            ResponseParseFailure: If the body is not JSON
        """
        url = self.config.simulate_url
        logger.debug("POST %s (network %s)", url, payload.get("network_id"))

        try:
            if self._http_client is not None:
                response = self._http_client.post(url, headers=self.headers, json=payload)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = client.post(url, headers=self.headers, json=payload)
        except httpx.HTTPError as exc:
            raise TransportFailure(f"Simulation request failed: {exc}") from exc

        if not response.is_success:
            raise TransportFailure(f"Simulation failed: {response.reason_phrase}")

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseParseFailure(f"Simulation response is not JSON: {exc}") from exc

    def interpret(self, intent: TransactionIntent, payload: dict[str, Any], body: Any) -> SimulationResult:
        transaction = body.get("transaction") if isinstance(body, dict) else None
        if not isinstance(transaction, dict) or "status" not in transaction:
            raise ResponseParseFailure("Unexpected simulation response: missing transaction.status")

        return SimulationResult(
            status=bool(transaction["status"]),
            gas_used=transaction.get("gas_used"),
            to=intent.to,
            value=intent.value or "0",
            from_address=payload["from"],
            state_changes=body.get("state_changes"),
            raw=body,
        )

    def simulate(self, intent: TransactionIntent, wallet: WalletProvider) -> SimulationResult:
        payload = self.build_request(intent, wallet)
        body = self.submit(payload)
        result = self.interpret(intent, payload, body)
        logger.info(
            "Simulated %s -> %s on network %s: %s",
            result.from_address,
            result.to,
            payload["network_id"],
            result.status_label,
        )
        return result
