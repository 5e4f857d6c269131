"""Unit tests for the configuration data models."""

import dataclasses

import pytest

from deploy_config.errors import InvalidConfiguration, UnknownNetwork
from deploy_config.models.compiler import CompilerSettings, MochaOptions
from deploy_config.models.configuration import Configuration, default_networks
from deploy_config.models.network import NetworkConfig, WalletProvider
from deploy_config.models.secret import MASK, Secret


def _network(name="devnet", chain_id=1337, **overrides):
    fields = dict(
        name=name,
        chain_id=chain_id,
        rpc_endpoint_env_var=f"{name.upper()}_ENDPOINT",
        secret_env_var=f"{name.upper()}_DEPLOYER",
        gas_price="1",
    )
    fields.update(overrides)
    return NetworkConfig.declare(**fields)


class TestDeclaredConfiguration:
    def test_declared_networks(self):
        config = Configuration.default()
        assert config.network_names == ["matic", "mumbai"]

    def test_matic_parameters(self):
        matic = Configuration.default().get_network("matic")
        assert matic.chain_id == 137
        assert matic.timeout_blocks == 200
        assert matic.skip_dry_run is False
        assert matic.gas_limit == 7_000_000
        assert matic.gas_price_wei == 200 * 10**9
        assert matic.rpc_endpoint_env_var == "MATIC_ENDPOINT_FINAL"
        assert matic.secret_env_var == "MATIC_DEPLOYER_FINAL"

    def test_mumbai_parameters(self):
        mumbai = Configuration.default().get_network("mumbai")
        assert mumbai.chain_id == 80001
        assert mumbai.timeout_blocks == 200
        assert mumbai.skip_dry_run is True
        assert mumbai.gas_limit == 7_000_000
        assert mumbai.gas_price_wei == 100 * 10**9
        assert mumbai.required_env_vars == ("MUMBAI_DEPLOYER", "MUMBAI_ENDPOINT")

    def test_compiler_and_tooling(self):
        config = Configuration.default()
        assert config.build_output_directory == "./build"
        assert config.compiler.version == "0.8.14"
        assert config.compiler.optimizer_enabled is True
        assert config.compiler.optimizer_runs == 20000
        assert config.test_runner_options.enable_timeouts is False
        assert config.plugins == ("truffle-contract-size",)
        assert dict(config.api_keys) == {}

    def test_build_directory_override(self):
        assert Configuration.default("./out").build_output_directory == "./out"

    def test_to_dict_shape(self):
        data = Configuration.default().to_dict()
        assert data["contracts_build_directory"] == "./build"
        assert data["compilers"]["solc"] == {
            "version": "0.8.14",
            "settings": {"optimizer": {"enabled": True, "runs": 20000}},
        }
        assert data["mocha"] == {"enableTimeouts": False}
        assert data["plugins"] == ["truffle-contract-size"]
        assert data["networks"]["matic"]["gas_price_wei"] == 200_000_000_000

    def test_no_secret_values_in_declaration(self):
        for network in default_networks():
            for value in network.to_dict().values():
                assert not (isinstance(value, str) and " " in value)


class TestConfigurationInvariants:
    def test_duplicate_network_name(self):
        with pytest.raises(InvalidConfiguration, match="Duplicate network name"):
            Configuration.build([_network("a", 1), _network("a", 2)])

    def test_duplicate_chain_id(self):
        with pytest.raises(InvalidConfiguration, match="Chain id 5"):
            Configuration.build([_network("a", 5), _network("b", 5)])

    def test_non_positive_gas_limit(self):
        with pytest.raises(InvalidConfiguration, match="Gas limit"):
            Configuration.build([_network(gas_limit=0)])

    def test_non_positive_timeout(self):
        with pytest.raises(InvalidConfiguration, match="Timeout blocks"):
            Configuration.build([_network(timeout_blocks=0)])

    def test_unknown_network(self):
        with pytest.raises(UnknownNetwork) as exc_info:
            Configuration.default().get_network("goerli")
        assert exc_info.value.available == ["matic", "mumbai"]

    def test_read_only(self):
        config = Configuration.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.build_output_directory = "/tmp"
        with pytest.raises(TypeError):
            config.networks["evil"] = _network("evil")

    def test_default_api_keys_read_only(self):
        for config in (Configuration.default(), Configuration.build([_network()])):
            with pytest.raises(TypeError):
                config.api_keys["etherscan"] = "ETHERSCAN_API_KEY"

    def test_given_api_keys_copied_and_read_only(self):
        keys = {"polygonscan": "POLYGONSCAN_API_KEY"}
        config = Configuration.build([_network()], api_keys=keys)
        keys["etherscan"] = "ETHERSCAN_API_KEY"
        assert dict(config.api_keys) == {"polygonscan": "POLYGONSCAN_API_KEY"}
        with pytest.raises(TypeError):
            config.api_keys["etherscan"] = "ETHERSCAN_API_KEY"

    def test_plugins_kept_in_order(self):
        config = Configuration.build([_network()], plugins=["b-plugin", "a-plugin"])
        assert config.plugins == ("b-plugin", "a-plugin")


class TestCompilerSettings:
    def test_rejects_bad_version(self):
        with pytest.raises(ValueError, match="MAJOR.MINOR.PATCH"):
            CompilerSettings(version="0.8")

    def test_rejects_negative_runs(self):
        with pytest.raises(ValueError):
            CompilerSettings(optimizer_runs=-1)

    def test_mocha_options_dict(self):
        assert MochaOptions(enable_timeouts=True).to_dict() == {"enableTimeouts": True}


class TestSecret:
    def test_masked_representations(self):
        secret = Secret("word " * 12)
        assert str(secret) == MASK
        assert MASK in repr(secret)
        assert "word" not in repr(secret)
        assert "word" not in f"{secret}"

    def test_reveal(self):
        assert Secret("0xabc").reveal() == "0xabc"

    def test_provider_repr_hides_secret(self):
        provider = WalletProvider("matic", 137, "https://rpc", Secret("hunter2"))
        assert "hunter2" not in repr(provider)
        assert provider.to_dict()["secret"] == MASK
