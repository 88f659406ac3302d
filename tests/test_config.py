"""Tests for environment configuration loading."""

import logging

import dotenv
import pytest

from evm_disasm.config import Config, ConfigError, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Clear config env vars and keep a stray .env file out of the picture."""
    monkeypatch.delenv("RPC_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("READ_CHUNK_SIZE", raising=False)
    monkeypatch.setattr("evm_disasm.config.load_dotenv", lambda *args, **kwargs: False)


def test_load_config_defaults():
    config = load_config()
    assert config == Config()
    assert config.rpc_url == "https://mainnet.base.org"
    assert config.log_level == logging.WARNING
    assert config.read_chunk_size == 8192


def test_load_config_rpc_url(monkeypatch):
    monkeypatch.setenv("RPC_URL", "http://localhost:8545")
    assert load_config().rpc_url == "http://localhost:8545"


def test_load_config_log_level_case_insensitive(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert load_config().log_level == logging.DEBUG


def test_load_config_invalid_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError, match="LOG_LEVEL"):
        load_config()


def test_load_config_chunk_size(monkeypatch):
    monkeypatch.setenv("READ_CHUNK_SIZE", "64")
    assert load_config().read_chunk_size == 64


def test_load_config_empty_chunk_size(monkeypatch):
    monkeypatch.setenv("READ_CHUNK_SIZE", "")
    assert load_config().read_chunk_size == 8192


@pytest.mark.parametrize("value", ["0", "-5", "lots"])
def test_load_config_invalid_chunk_size(monkeypatch, value):
    monkeypatch.setenv("READ_CHUNK_SIZE", value)
    with pytest.raises(ConfigError, match="READ_CHUNK_SIZE"):
        load_config()


def test_load_config_reads_dotenv_from_cwd(monkeypatch, tmp_path):
    monkeypatch.setattr("evm_disasm.config.load_dotenv", dotenv.load_dotenv)
    # Registered so the variable load_dotenv sets is removed afterwards
    monkeypatch.setenv("RPC_URL", "placeholder")
    monkeypatch.delenv("RPC_URL")
    (tmp_path / ".env").write_text("RPC_URL=http://dotenv:8545\n")
    monkeypatch.chdir(tmp_path)
    assert load_config().rpc_url == "http://dotenv:8545"
