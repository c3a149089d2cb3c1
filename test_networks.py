#!/usr/bin/env python3
"""
Tests for the network table and environment requirements
"""

import pytest

from config import Config, ConfigurationError
from networks import DEFAULT_NETWORK, UNSET, get_network, require_private_key


class TestNetworks:
    """Test class for network lookup"""

    def test_fuji(self, monkeypatch):
        monkeypatch.setenv("AVALANCHE_FUJI_RPC_URL", "https://fuji.example")
        monkeypatch.setenv("PRIVATE_KEY", "0xabc")

        fuji = get_network("fuji")

        assert fuji['url'] == "https://fuji.example"
        assert fuji['chainId'] == 43113
        assert fuji['confirmations'] == 4
        assert fuji['router'] == "0xA9d587a00A31A52Ed70D6026794a8FC5E2F5dCb0"
        assert fuji['linkToken'] == "0x0b9d5D9136855f6FEc3c0993feE6E9CE8a297846"
        assert fuji['accounts'] == ["0xabc"]

    def test_fuji_without_environment(self, monkeypatch):
        monkeypatch.delenv("AVALANCHE_FUJI_RPC_URL", raising=False)
        monkeypatch.delenv("PRIVATE_KEY", raising=False)

        fuji = get_network("fuji")

        assert fuji['url'] == UNSET
        assert fuji['accounts'] == []

    def test_default_network(self):
        assert DEFAULT_NETWORK == "hardhat"
        assert get_network(DEFAULT_NETWORK)['chainId'] == 31337

    def test_unknown_network(self):
        with pytest.raises(ConfigurationError, match="Unknown network"):
            get_network("mumbai")


class TestRequirements:
    """Test class for required environment values"""

    def test_private_key_missing_outside_tests(self, monkeypatch):
        monkeypatch.delenv("PRIVATE_KEY", raising=False)
        monkeypatch.delenv("FUNCTIONS_ENV", raising=False)
        with pytest.raises(ConfigurationError, match="PRIVATE_KEY"):
            require_private_key()

    def test_private_key_exemption_is_explicit(self, monkeypatch):
        """Only FUNCTIONS_ENV=test waives the key"""
        monkeypatch.delenv("PRIVATE_KEY", raising=False)
        monkeypatch.setenv("FUNCTIONS_ENV", "production")
        with pytest.raises(ConfigurationError, match="PRIVATE_KEY"):
            require_private_key()

    def test_private_key_optional_in_tests(self, monkeypatch):
        monkeypatch.delenv("PRIVATE_KEY", raising=False)
        monkeypatch.setenv("FUNCTIONS_ENV", "test")
        assert require_private_key() == ""

    def test_config_require(self, monkeypatch):
        monkeypatch.delenv("NFT_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="NFT_API_KEY not provided"):
            Config().require("NFT_API_KEY")

        monkeypatch.setenv("NFT_API_KEY", "key")
        assert Config().require("NFT_API_KEY") == "key"
