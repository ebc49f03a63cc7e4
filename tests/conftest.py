"""
Pytest fixtures for the AGW SDK tests.
"""
import asyncio

import pytest

from agw_sdk.chain import ZkSyncChainBinding
from agw_sdk.config import NetworkConfig, SigningConfig
from agw_sdk.signer import LocalSigner

# Constants for testing
TEST_PRIV_KEY = "0x0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"
TEST_RPC_URL = "https://rpc.example.com"
ABSTRACT_MAINNET_ID = 2741
ABSTRACT_TESTNET_ID = 11124
SMART_ACCOUNT = "0x5a5a5a5a5a5a5a5a5a5a5a5a5a5a5a5a5a5a5a5a"
VALIDATOR = "0xabcd000000000000000000000000000000000000"
HOOK_A = "0xa1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1a1"
HOOK_B = "0xb2b2b2b2b2b2b2b2b2b2b2b2b2b2b2b2b2b2b2b2"
RECIPIENT = "0x1234567890123456789012345678901234567890"

TEST_TX = {
    "to": RECIPIENT,
    "data": "0x",
    "value": 1000,
    "nonce": 7,
    "gas": 250000,
    "maxFeePerGas": 25000000,
    "maxPriorityFeePerGas": 0,
    "gasPerPubdata": 50000,
}


def run(coro):
    """Drive a coroutine to completion"""
    return asyncio.run(coro)


class FakeChainBinding(ZkSyncChainBinding):
    """ZkSync binding with a scripted live chain id instead of an RPC node"""

    def __init__(self, live_chain_id=ABSTRACT_MAINNET_ID, error=None):
        self.live_chain_id = live_chain_id
        self.error = error
        self.chain_id_reads = 0

    async def fetch_live_chain_id(self):
        self.chain_id_reads += 1
        if self.error is not None:
            raise self.error
        return self.live_chain_id


class FakeAccountContract:
    """Account contract returning a scripted hook list"""

    def __init__(self, hooks=None, error=None, address=SMART_ACCOUNT):
        self.hooks = hooks if hooks is not None else []
        self.error = error
        self.address = address
        self.calls = []

    async def list_hooks(self, validation=True):
        self.calls.append(validation)
        if self.error is not None:
            raise self.error
        return self.hooks


class RecordingSigner:
    """Wraps a LocalSigner and records every typed data it signs"""

    def __init__(self, signer):
        self.inner = signer
        self.address = signer.address
        self.signed = []

    async def sign_typed_data(self, typed_data):
        self.signed.append(typed_data)
        return await self.inner.sign_typed_data(typed_data)


@pytest.fixture(autouse=True)
def _reset_network_cache():
    NetworkConfig._networks_cache = None
    yield
    NetworkConfig._networks_cache = None


@pytest.fixture
def local_signer():
    return LocalSigner(TEST_PRIV_KEY)


@pytest.fixture
def signer(local_signer):
    return RecordingSigner(local_signer)


@pytest.fixture
def chain():
    return FakeChainBinding()


@pytest.fixture
def account_contract():
    return FakeAccountContract(hooks=[HOOK_A, HOOK_B])


@pytest.fixture
def config():
    return SigningConfig(supported_chain_ids=frozenset({ABSTRACT_MAINNET_ID, ABSTRACT_TESTNET_ID}))
