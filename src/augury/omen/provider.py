"""
Tenderly simulation action provider.

Exposes `simulate_transaction` to an agent framework. The action always
returns text: success reports and failures alike are strings the host
can show directly to the agent or user.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence, Union

import httpx

from ..auspex.wallet import WalletProvider
from ..config import ProviderConfig
from ..glyph.encoder import encode
from ..networks import Network
from ..networks import supports_network as _supports_network
from ..spec.models import TransactionIntent
from ..spec.schemas import TRANSACTION_INTENT_SCHEMA
from .actions import ActionProvider, create_action
from .client import DEFAULT_TIMEOUT, TenderlySimulationClient
from .render import render_error, render_result

logger = logging.getLogger(__name__)


class TenderlySimulationProvider(ActionProvider):
    def __init__(
        self,
        config: ProviderConfig,
        http_client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        super().__init__("tenderly_simulation")
        self.config = config
        self.client = TenderlySimulationClient(config, http_client=http_client, timeout=timeout)

    @create_action(
        name="simulate_transaction",
        description="""
        Simulates a transaction using Tenderly's API before executing it on-chain.

        Inputs:
        - to: The destination address
        - value: (optional) Amount of native tokens to send
        - data: (optional) Transaction data
        - from: (optional) Sender address
        - gas: (optional) Gas limit
        - gasPrice: (optional) Gas price
        """,
        schema=TRANSACTION_INTENT_SCHEMA,
    )
    def simulate_transaction(
        self,
        wallet: WalletProvider,
        args: Union[TransactionIntent, Mapping[str, Any]],
    ) -> str:
        try:
            intent = args if isinstance(args, TransactionIntent) else TransactionIntent.from_dict(args)
            return render_result(self.client.simulate(intent, wallet))
        except Exception as exc:
            logger.warning("Simulation did not complete: %s", exc)
            return render_error(exc)

    def simulate_contract_call(
        self,
        wallet: WalletProvider,
        to: str,
        signature: str,
        args: Optional[Sequence[Any]] = None,
        value: Optional[str] = None,
        from_address: Optional[str] = None,
        gas: Optional[int] = None,
        gas_price: Optional[str] = None,
    ) -> str:
        """Encode `signature(args)` as calldata and simulate calling `to` with it."""
        try:
            data = "0x" + encode(signature, args)
        except Exception as exc:
            logger.warning("Could not encode %s: %s", signature, exc)
            return render_error(exc)

        fields = {
            "to": to,
            "value": value,
            "data": data,
            "from": from_address,
            "gas": gas,
            "gasPrice": gas_price,
        }
        return self.simulate_transaction(
            wallet, {key: item for key, item in fields.items() if item is not None}
        )

    def supports_network(self, network: Network) -> bool:
        return _supports_network(network)


def tenderly_simulation_provider(config: ProviderConfig, **kwargs: Any) -> TenderlySimulationProvider:
    return TenderlySimulationProvider(config, **kwargs)
