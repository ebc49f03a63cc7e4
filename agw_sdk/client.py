"""
SmartAccountClient - Session client for AGW smart accounts.
"""
import logging
import urllib.parse
from typing import Any, Mapping, Optional, Union

from web3 import AsyncWeb3

from .account import AccountContract
from .chain import ZkSyncChainBinding
from .config import NetworkConfig, SigningConfig
from .models import HookPayloads, SigningMode, TransactionRequest
from .signer import Signer
from .signing import sign_transaction


class SmartAccountClient:
    """
    Client that signs transactions for an AGW smart account.

    The account holds no key of its own. Transactions are signed by an
    authorized signer (the owner or a session key) and wrapped so the
    account's validator module can verify them.

    To use this client, you'll need:
    - An RPC endpoint for an Abstract network
    - The smart account address
    - A signer authorized on that account
    - The address of the validator module that checks the signer
    """

    def __init__(
        self,
        rpc_url: str,
        account_address: str,
        signer: Signer,
        validator: str,
        chain_id: Optional[int] = None,
        config: Optional[SigningConfig] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the SmartAccountClient

        Args:
            rpc_url: RPC endpoint URL (e.g., "https://api.testnet.abs.xyz")
            account_address: Smart account address
            signer: Authorized signer for the account
            validator: Validator module address used for delegated signatures
            chain_id: Chain the account lives on (checked against the live network)
            config: Signing configuration; defaults to all packaged networks
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If signer is missing or rpc_url doesn't use https (unless local)
        """
        if signer is None:
            raise ValueError("signer must be provided")

        parsed = urllib.parse.urlparse(rpc_url)
        host = parsed.netloc.split(':')[0]
        is_local = host in ('localhost', '127.0.0.1')
        if parsed.scheme != 'https' and not is_local:
            raise ValueError(f"rpc_url must use https:// for security (got: {parsed.scheme}://)")

        self.rpc_url = rpc_url
        self.signer = signer
        self.validator = validator
        self.chain_id = chain_id
        self.config = config or SigningConfig.from_networks()
        self.logger = logger or logging.getLogger(__name__)

        self.w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(rpc_url))
        self.chain = ZkSyncChainBinding(self.w3)
        self.account_contract = AccountContract(self.w3, account_address)

    @classmethod
    def from_network(
        cls,
        network: str,
        account_address: str,
        signer: Signer,
        validator: str,
        rpc_url: Optional[str] = None,
        **kwargs
    ) -> "SmartAccountClient":
        """
        Create a client from the packaged network configuration.

        Args:
            network: Network name (e.g., "abstract-testnet")
            account_address: Smart account address
            signer: Authorized signer for the account
            validator: Validator module address
            rpc_url: Optional RPC URL override
            **kwargs: Passed through to the constructor
        """
        return cls(
            rpc_url=NetworkConfig.get_rpc_url(network, override=rpc_url),
            account_address=account_address,
            signer=signer,
            validator=validator,
            chain_id=NetworkConfig.get_chain_id(network),
            **kwargs
        )

    @property
    def address(self) -> str:
        """Smart account address"""
        return self.account_contract.address

    async def sign_transaction(
        self,
        request: Union[TransactionRequest, Mapping[str, Any]],
        mode: SigningMode = SigningMode.DELEGATED,
        hook_payloads: Optional[Union[HookPayloads, Mapping[str, Any]]] = None
    ) -> bytes:
        """
        Sign a transaction for the smart account.

        Args:
            request: Transaction request fields
            mode: SigningMode.DIRECT to sign as the signer itself
            hook_payloads: Payloads for the account's validation hooks

        Returns:
            Serialized signed transaction, ready for broadcast
        """
        tx = TransactionRequest.normalize(request)

        account_contract = self.account_contract
        if tx.account and tx.account != account_contract.address:
            account_contract = AccountContract(self.w3, tx.account)

        self.logger.debug(f"Signing {SigningMode.parse(mode).value} transaction for {tx.account or self.address}")
        return await sign_transaction(
            tx,
            signer=self.signer,
            chain=self.chain,
            account_contract=account_contract,
            validator=self.validator,
            config=self.config,
            account_address=self.address,
            chain_id=self.chain_id,
            mode=mode,
            hook_payloads=hook_payloads,
        )
