"""
Network and signing configuration for the AGW SDK.
"""
import importlib.resources
import json
import logging
import os
from typing import Any, Dict, FrozenSet, Iterable, Optional

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

TESTNET_NETWORK = "abstract-testnet"


class NetworkConfig:
    """
    Access to the packaged network table (networks.json).

    The table is read once and cached on the class.
    """

    _networks_cache: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def load_networks(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load all known networks.

        Returns:
            Mapping of network name to its configuration
        """
        if cls._networks_cache is None:
            resource = importlib.resources.files("agw_sdk").joinpath("networks.json")
            with resource.open("r", encoding="utf-8") as f:
                cls._networks_cache = json.load(f)
            logger.debug(f"Loaded {len(cls._networks_cache)} network definitions")
        return cls._networks_cache

    @classmethod
    def get_network(cls, name: str) -> Dict[str, Any]:
        """
        Get the configuration of a single network.

        Raises:
            ValueError: If the network is unknown
        """
        networks = cls.load_networks()
        if name not in networks:
            available = ", ".join(sorted(networks))
            raise ValueError(f"Unknown network '{name}'. Available networks: {available}")
        return networks[name]

    @classmethod
    def get_rpc_url(cls, name: str, override: Optional[str] = None) -> str:
        """
        Resolve the RPC URL for a network.

        Order: explicit override, then the <NETWORK>_RPC_URL environment
        variable, then the packaged table.
        """
        if override:
            return override

        env_var = f"{name.upper().replace('-', '_')}_RPC_URL"
        env_url = os.environ.get(env_var)
        if env_url:
            logger.debug(f"Using RPC URL from {env_var}")
            return env_url

        return cls.get_network(name)["rpc"]

    @classmethod
    def get_chain_id(cls, name: str) -> int:
        return int(cls.get_network(name)["chainId"])


class SigningConfig(BaseModel):
    """
    Deployment settings for the signing pipeline.

    Attributes:
        supported_chain_ids: Chains the pipeline is allowed to sign for
        resolve_hooks: Whether delegated signatures query the account's
            validation hooks; when disabled the hook sequence is empty
    """
    supported_chain_ids: FrozenSet[int]
    resolve_hooks: bool = True

    class Config:
        frozen = True

    @field_validator("supported_chain_ids")
    @classmethod
    def _not_empty(cls, value: FrozenSet[int]) -> FrozenSet[int]:
        if not value:
            raise ValueError("supported_chain_ids must not be empty")
        return value

    @classmethod
    def from_networks(cls, names: Optional[Iterable[str]] = None, resolve_hooks: bool = True) -> "SigningConfig":
        """
        Build a config allowing the given networks (all packaged networks by default).
        """
        if names is None:
            names = NetworkConfig.load_networks().keys()
        chain_ids = frozenset(NetworkConfig.get_chain_id(name) for name in names)
        return cls(supported_chain_ids=chain_ids, resolve_hooks=resolve_hooks)

    @classmethod
    def testnet_only(cls) -> "SigningConfig":
        """Single testnet, no validation hook support"""
        return cls.from_networks([TESTNET_NETWORK], resolve_hooks=False)
