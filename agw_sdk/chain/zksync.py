"""
zkSync EIP-712 chain binding.

Abstract runs on the ZK stack, where account-abstracted transactions use
the EIP-712 transaction type (0x71) and carry the account's signature in
a dedicated custom signature field.
"""
import hashlib
import logging
from typing import Any, Dict, List

import rlp
from eth_utils import to_canonical_address
from web3 import AsyncWeb3

from agw_sdk.exceptions import InvalidTransactionError
from agw_sdk.models import ZERO_SIGNATURE, EcdsaSignature, TransactionRequest, TypedData

logger = logging.getLogger(__name__)

EIP712_TX_TYPE = 0x71
BYTECODE_HASH_VERSION = 0x01
BYTECODE_WORD_SIZE = 32
MAX_BYTECODE_WORDS = 2**16 - 1


def _address_to_uint(address: str) -> int:
    return int(address, 16)


def hash_bytecode(bytecode: bytes) -> bytes:
    """
    Compute the zkSync versioned bytecode hash of a factory dependency.

    Layout: version byte, zero byte, uint16 word count, then the last 28
    bytes of sha256(bytecode).

    Raises:
        InvalidTransactionError: If the bytecode is not a valid zkSync bytecode
    """
    if len(bytecode) % BYTECODE_WORD_SIZE != 0:
        raise InvalidTransactionError(
            f"Bytecode length must be a multiple of {BYTECODE_WORD_SIZE}, got {len(bytecode)}"
        )
    words = len(bytecode) // BYTECODE_WORD_SIZE
    if words % 2 == 0:
        raise InvalidTransactionError(f"Bytecode must have an odd number of words, got {words}")
    if words > MAX_BYTECODE_WORDS:
        raise InvalidTransactionError(f"Bytecode is too long: {words} words")

    digest = hashlib.sha256(bytecode).digest()
    return bytes([BYTECODE_HASH_VERSION, 0]) + words.to_bytes(2, "big") + digest[4:]


class ZkSyncChainBinding:
    """
    Chain binding for ZK stack networks, backed by an AsyncWeb3 instance.
    """

    DOMAIN_NAME = "zkSync"
    DOMAIN_VERSION = "2"

    EIP712_TYPES = {
        "EIP712Domain": [
            {"name": "name", "type": "string"},
            {"name": "version", "type": "string"},
            {"name": "chainId", "type": "uint256"},
        ],
        "Transaction": [
            {"name": "txType", "type": "uint256"},
            {"name": "from", "type": "uint256"},
            {"name": "to", "type": "uint256"},
            {"name": "gasLimit", "type": "uint256"},
            {"name": "gasPerPubdataByteLimit", "type": "uint256"},
            {"name": "maxFeePerGas", "type": "uint256"},
            {"name": "maxPriorityFeePerGas", "type": "uint256"},
            {"name": "paymaster", "type": "uint256"},
            {"name": "nonce", "type": "uint256"},
            {"name": "value", "type": "uint256"},
            {"name": "data", "type": "bytes"},
            {"name": "factoryDeps", "type": "bytes32[]"},
            {"name": "paymasterInput", "type": "bytes"},
        ],
    }

    def __init__(self, w3: AsyncWeb3):
        self.w3 = w3

    async def fetch_live_chain_id(self) -> int:
        chain_id = await self.w3.eth.chain_id
        return int(chain_id)

    def derive_domain(self, tx: TransactionRequest, *, chain_id: int, from_address: str) -> TypedData:
        """
        Build the EIP-712 typed data the signer signs for this transaction.

        Args:
            tx: Normalized transaction request
            chain_id: Live chain id fetched for this call
            from_address: Address the transaction is sent from

        Returns:
            TypedData bound to chain_id

        Raises:
            InvalidTransactionError: If a factory dependency is not valid bytecode
        """
        message: Dict[str, Any] = {
            "txType": EIP712_TX_TYPE,
            "from": _address_to_uint(from_address),
            "to": _address_to_uint(tx.to) if tx.to else 0,
            "gasLimit": tx.gas,
            "gasPerPubdataByteLimit": tx.gas_per_pubdata,
            "maxFeePerGas": tx.max_fee_per_gas,
            "maxPriorityFeePerGas": tx.max_priority_fee_per_gas,
            "paymaster": _address_to_uint(tx.paymaster) if tx.paymaster else 0,
            "nonce": tx.nonce,
            "value": tx.value,
            "data": tx.data,
            "factoryDeps": [hash_bytecode(dep) for dep in tx.factory_deps],
            "paymasterInput": tx.paymaster_input,
        }
        return TypedData(
            domain={
                "name": self.DOMAIN_NAME,
                "version": self.DOMAIN_VERSION,
                "chainId": chain_id,
            },
            types=self.EIP712_TYPES,
            primary_type="Transaction",
            message=message,
        )

    def serialize_transaction(
        self,
        tx: TransactionRequest,
        *,
        chain_id: int,
        from_address: str,
        custom_signature: bytes,
        signature: EcdsaSignature = ZERO_SIGNATURE,
    ) -> bytes:
        """
        Serialize a signed EIP-712 transaction as 0x71 || rlp(fields).

        Returns:
            Raw transaction bytes ready for eth_sendRawTransaction
        """
        paymaster_params: List[bytes] = []
        if tx.paymaster and tx.paymaster_input:
            paymaster_params = [to_canonical_address(tx.paymaster), tx.paymaster_input]

        fields = [
            tx.nonce,
            tx.max_priority_fee_per_gas,
            tx.max_fee_per_gas,
            tx.gas,
            to_canonical_address(tx.to) if tx.to else b"",
            tx.value,
            tx.data,
            chain_id,
            signature.r,
            signature.s,
            chain_id,
            to_canonical_address(from_address),
            tx.gas_per_pubdata,
            list(tx.factory_deps),
            custom_signature,
            paymaster_params,
        ]
        raw = bytes([EIP712_TX_TYPE]) + rlp.encode(fields)
        logger.debug(f"Serialized EIP-712 transaction ({len(raw)} bytes) for chain {chain_id}")
        return raw
