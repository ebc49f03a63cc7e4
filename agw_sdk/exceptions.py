"""
Exceptions for the AGW SDK.
"""


class AgwError(Exception):
    """Base exception for all AGW SDK errors."""
    pass


class MissingAccountError(AgwError):
    """Raised when no smart account address can be resolved for signing."""
    pass


class InvalidChainError(AgwError):
    """Raised when no chain is declared or the chain is not supported."""
    pass


class ChainMismatchError(AgwError):
    """Raised when the live chain id disagrees with the declared chain."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Chain ID mismatch: expected {expected}, got {actual}")


class NetworkError(AgwError):
    """Raised when the live chain id cannot be read."""
    pass


class MissingCapabilityError(AgwError):
    """Raised when the chain binding lacks a required function."""
    pass


class SerializationCapabilityMissingError(MissingCapabilityError):
    """Raised when the chain binding has no transaction serializer."""
    pass


class CapabilityQueryError(AgwError):
    """Raised when the account's hook registry read fails or is malformed."""
    pass


class EncodingError(AgwError):
    """Raised when signature composition inputs are malformed."""
    pass


class SignerError(AgwError):
    """Raised when the authorized signer fails to produce a signature."""
    pass


class InvalidTransactionError(AgwError):
    """Raised when a transaction request fails EIP-712 request checks."""
    pass
