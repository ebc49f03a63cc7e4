"""
AGW SDK - Transaction signing for Abstract Global Wallet smart accounts.
"""
from .version import __version__
from .exceptions import (
    AgwError,
    MissingAccountError,
    InvalidChainError,
    ChainMismatchError,
    NetworkError,
    MissingCapabilityError,
    SerializationCapabilityMissingError,
    CapabilityQueryError,
    EncodingError,
    SignerError,
    InvalidTransactionError,
)
from .models import (
    TransactionRequest,
    SigningMode,
    HookPayloads,
    CompositeSignature,
    TypedData,
    EcdsaSignature,
    ZERO_SIGNATURE,
)
from .config import NetworkConfig, SigningConfig
from .signer import Signer, LocalSigner
from .chain import ChainBinding, ZkSyncChainBinding
from .account import AccountContract
from .signing import sign_transaction
from .client import SmartAccountClient

__all__ = [
    "SmartAccountClient",
    "sign_transaction",
    "TransactionRequest",
    "SigningMode",
    "HookPayloads",
    "CompositeSignature",
    "TypedData",
    "EcdsaSignature",
    "ZERO_SIGNATURE",
    "NetworkConfig",
    "SigningConfig",
    "Signer",
    "LocalSigner",
    "ChainBinding",
    "ZkSyncChainBinding",
    "AccountContract",
    "AgwError",
    "MissingAccountError",
    "InvalidChainError",
    "ChainMismatchError",
    "NetworkError",
    "MissingCapabilityError",
    "SerializationCapabilityMissingError",
    "CapabilityQueryError",
    "EncodingError",
    "SignerError",
    "InvalidTransactionError",
    "__version__",
]
