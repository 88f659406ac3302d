import pytest

from evm_disasm.chain.rpc import clear_cache
from evm_disasm.config import Config


@pytest.fixture()
def test_config():
    return Config(
        rpc_url="https://mainnet.base.org",
        read_chunk_size=16,
    )


@pytest.fixture()
def cli_env(monkeypatch, test_config):
    """Run the CLI against test_config instead of the real environment."""
    monkeypatch.setattr("evm_disasm.cli.load_config", lambda: test_config)
    clear_cache()
    yield test_config
    clear_cache()
