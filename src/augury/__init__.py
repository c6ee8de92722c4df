__all__ = [
    # Configuration
    "ConfigError",
    "ProviderConfig",
    # Call encoding
    "EncodingError",
    "EncodingMismatch",
    "MalformedSignature",
    "encode",
    "function_selector",
    "parse_signature",
    # Intent and result models
    "IntentValidationError",
    "SimulationResult",
    "TransactionIntent",
    # Simulation
    "ResponseParseFailure",
    "SimulationError",
    "TenderlySimulationClient",
    "TenderlySimulationProvider",
    "TransportFailure",
    "tenderly_simulation_provider",
    # Wallet
    "LocalWalletProvider",
    "StaticWalletProvider",
    "WalletProvider",
    # Networks
    "Network",
    "SUPPORTED_CHAIN_IDS",
    "supports_network",
]

from .config import ConfigError, ProviderConfig
from .glyph.encoder import (
    EncodingError,
    EncodingMismatch,
    MalformedSignature,
    encode,
    function_selector,
    parse_signature,
)
from .spec.models import SimulationResult, TransactionIntent
from .spec.schemas import IntentValidationError
from .omen.client import (
    ResponseParseFailure,
    SimulationError,
    TenderlySimulationClient,
    TransportFailure,
)
from .omen.provider import TenderlySimulationProvider, tenderly_simulation_provider
from .auspex.wallet import LocalWalletProvider, StaticWalletProvider, WalletProvider
from .networks import SUPPORTED_CHAIN_IDS, Network, supports_network
