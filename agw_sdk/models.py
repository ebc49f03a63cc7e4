"""
Data models for the AGW SDK.
"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, NamedTuple, Optional, Tuple, Union

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError, EncodingError as AbiEncodingError
from eth_utils import is_address, to_checksum_address
from hexbytes import HexBytes
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .exceptions import EncodingError, InvalidTransactionError

UINT256_MAX = 2**256 - 1
DEFAULT_GAS_PER_PUBDATA = 50000
SIGNATURE_LENGTH = 65
ADDRESS_LENGTH = 20

# Layout the AGW account contract decodes from a delegated signature
COMPOSITE_SIGNATURE_TYPES = ["bytes", "address", "bytes[]"]

HexLike = Union[bytes, bytearray, str]


def to_uint256(value: Any) -> int:
    """
    Coerce an integer, hex string or decimal string into an unsigned 256-bit int.

    Raises:
        ValueError: If the value is not numeric or is out of range
    """
    if isinstance(value, bool):
        raise ValueError("Booleans are not valid numeric values")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if text.lower().startswith("0x"):
            number = int(text, 16) if len(text) > 2 else 0
        else:
            number = int(text, 10)
    else:
        raise ValueError(f"Expected an integer or numeric string, got {type(value).__name__}")

    if number < 0 or number > UINT256_MAX:
        raise ValueError(f"Value {number} is outside the uint256 range")
    return number


def to_bytes_value(value: HexLike) -> bytes:
    """
    Convert bytes or a hex string into plain bytes.

    Raises:
        ValueError: If the value is neither bytes nor a hex string
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return bytes(HexBytes(value))
    raise ValueError(f"Expected bytes or hex string, got {type(value).__name__}")


class SigningMode(str, Enum):
    """
    How the authorized signer's signature is presented to the smart account.

    DIRECT signs as the signer itself and returns the raw signature.
    DELEGATED wraps the signature with the validator address and hook payloads.
    """
    DIRECT = "direct"
    DELEGATED = "delegated"

    @classmethod
    def parse(cls, value: Union["SigningMode", str]) -> "SigningMode":
        """
        Raises:
            InvalidTransactionError: If value names no signing mode
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidTransactionError(f"Unknown signing mode: {value!r}") from e


class EcdsaSignature(NamedTuple):
    """Standard ECDSA fields carried by a serialized transaction"""
    r: int
    s: int
    v: int


# Placeholder r/s/v; AGW verification reads only the custom signature field
ZERO_SIGNATURE = EcdsaSignature(r=0, s=0, v=0)


class TransactionRequest(BaseModel):
    """zkSync EIP-712 transaction request, normalized once on construction"""
    to: Optional[str] = None
    data: bytes = b""
    value: int = 0
    nonce: int = 0
    gas: int = 0
    max_fee_per_gas: int = Field(0, alias="maxFeePerGas")
    max_priority_fee_per_gas: int = Field(0, alias="maxPriorityFeePerGas")
    gas_per_pubdata: int = Field(DEFAULT_GAS_PER_PUBDATA, alias="gasPerPubdata")
    chain_id: Optional[int] = Field(None, alias="chainId")
    account: Optional[str] = None
    factory_deps: Tuple[bytes, ...] = Field((), alias="factoryDeps")
    paymaster: Optional[str] = None
    paymaster_input: bytes = Field(b"", alias="paymasterInput")

    class Config:
        populate_by_name = True
        frozen = True

    @field_validator(
        "value", "nonce", "gas", "max_fee_per_gas", "max_priority_fee_per_gas",
        "gas_per_pubdata", "chain_id",
        mode="before",
    )
    @classmethod
    def _coerce_uint256(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return to_uint256(value)

    @field_validator("data", "paymaster_input", mode="before")
    @classmethod
    def _coerce_bytes(cls, value: Any) -> bytes:
        if value is None:
            return b""
        return to_bytes_value(value)

    @field_validator("factory_deps", mode="before")
    @classmethod
    def _coerce_factory_deps(cls, value: Any) -> Tuple[bytes, ...]:
        if value is None:
            return ()
        return tuple(to_bytes_value(dep) for dep in value)

    @field_validator("to", "account", "paymaster", mode="before")
    @classmethod
    def _checksum_address(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            value = "0x" + bytes(value).hex()
        if not isinstance(value, str) or not is_address(value):
            raise ValueError(f"Invalid address: {value!r}")
        return to_checksum_address(value)

    @model_validator(mode="after")
    def _check_eip712_request(self) -> "TransactionRequest":
        if bool(self.paymaster) != bool(self.paymaster_input):
            raise ValueError("paymaster and paymasterInput must be provided together")
        if self.max_fee_per_gas and self.max_priority_fee_per_gas > self.max_fee_per_gas:
            raise ValueError(
                f"maxPriorityFeePerGas ({self.max_priority_fee_per_gas}) "
                f"cannot be higher than maxFeePerGas ({self.max_fee_per_gas})"
            )
        return self

    @classmethod
    def normalize(cls, request: Union["TransactionRequest", Mapping[str, Any]]) -> "TransactionRequest":
        """
        Build a TransactionRequest from a mapping, or pass an existing one through.

        Raises:
            InvalidTransactionError: If any field fails validation
        """
        if isinstance(request, cls):
            return request
        try:
            return cls.model_validate(dict(request))
        except ValidationError as e:
            raise InvalidTransactionError(f"Invalid transaction request: {e}") from e


class HookPayloads(Mapping[str, bytes]):
    """
    Immutable mapping from validation hook address to payload bytes.

    Lookups are case-insensitive on the address; hooks with no entry
    resolve to empty bytes through payload_for().
    """

    def __init__(self, payloads: Optional[Mapping[str, HexLike]] = None):
        if payloads is not None and not isinstance(payloads, Mapping):
            raise EncodingError(f"Hook payloads must be a mapping, got {type(payloads).__name__}")
        normalized: Dict[str, bytes] = {}
        for address, payload in (payloads or {}).items():
            if not isinstance(address, str) or not is_address(address):
                raise EncodingError(f"Invalid hook address: {address!r}")
            try:
                normalized[to_checksum_address(address)] = to_bytes_value(payload)
            except ValueError as e:
                raise EncodingError(f"Invalid payload for hook {address}: {e}") from e
        self._payloads = MappingProxyType(normalized)

    def __getitem__(self, address: str) -> bytes:
        return self._payloads[to_checksum_address(address)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._payloads)

    def __len__(self) -> int:
        return len(self._payloads)

    def __repr__(self) -> str:
        return f"HookPayloads({dict(self._payloads)!r})"

    def payload_for(self, address: str) -> bytes:
        return self._payloads.get(to_checksum_address(address), b"")


@dataclass(frozen=True)
class TypedData:
    """EIP-712 typed data derived by a chain binding for one transaction"""
    domain: Dict[str, Any]
    types: Dict[str, Any]
    primary_type: str
    message: Dict[str, Any]

    @property
    def chain_id(self) -> int:
        return self.domain["chainId"]

    def as_message(self) -> Dict[str, Any]:
        """Full-message form accepted by eth_account's sign_typed_data"""
        return {
            "domain": dict(self.domain),
            "types": dict(self.types),
            "primaryType": self.primary_type,
            "message": dict(self.message),
        }


@dataclass(frozen=True)
class CompositeSignature:
    """
    Signature bundle decoded by the AGW account contract.

    Attributes:
        signature: Raw 65-byte signature from the authorized signer
        validator: Address of the validation module that checks the signature
        hook_data: Payloads ordered like the account's validation hooks
    """
    signature: bytes
    validator: str
    hook_data: Tuple[bytes, ...] = ()

    def encode(self) -> bytes:
        try:
            return abi_encode(
                COMPOSITE_SIGNATURE_TYPES,
                [self.signature, self.validator, list(self.hook_data)],
            )
        except AbiEncodingError as e:
            raise EncodingError(f"Failed to encode composite signature: {e}") from e

    @classmethod
    def decode(cls, data: bytes) -> "CompositeSignature":
        try:
            signature, validator, hook_data = abi_decode(COMPOSITE_SIGNATURE_TYPES, bytes(data))
        except DecodingError as e:
            raise EncodingError(f"Failed to decode composite signature: {e}") from e
        return cls(
            signature=bytes(signature),
            validator=to_checksum_address(validator),
            hook_data=tuple(bytes(item) for item in hook_data),
        )
