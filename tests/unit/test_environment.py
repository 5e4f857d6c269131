"""Unit tests for deploy_config.config.environment."""

from deploy_config.config.environment import EnvironmentConfig
from deploy_config.config.loader import ConfigurationLoader

from tests.conftest import MATIC_MNEMONIC


def _env_config(tmp_path, console, environ, env_text=None):
    env_file = tmp_path / ".env"
    if env_text is not None:
        env_file.write_text(env_text, encoding="utf-8")
    loader = ConfigurationLoader(environ=environ, env_file=str(env_file))
    return EnvironmentConfig(
        loader,
        env_file=str(env_file),
        environ=environ,
        console=console,
    )


def test_required_vars(tmp_path, recording_console):
    env_config = _env_config(tmp_path, recording_console, {})
    assert env_config.required_vars("matic") == ["MATIC_DEPLOYER_FINAL", "MATIC_ENDPOINT_FINAL"]


def test_missing_env_file_falls_back_to_environment(tmp_path, recording_console, full_env):
    env_config = _env_config(tmp_path, recording_console, full_env)
    assert env_config.validate_all("matic") is True
    assert "not found" in recording_console.file.getvalue()


def test_placeholder_rejected(tmp_path, recording_console):
    env_config = _env_config(
        tmp_path,
        recording_console,
        {},
        "MUMBAI_DEPLOYER=your_mnemonic\nMUMBAI_ENDPOINT=https://rpc.example.org\n",
    )
    assert env_config.check_env_file("mumbai") is False
    assert "MUMBAI_DEPLOYER contains placeholder" in recording_console.file.getvalue()


def test_placeholder_overridden_by_environment(tmp_path, recording_console):
    env_config = _env_config(
        tmp_path,
        recording_console,
        {"MUMBAI_DEPLOYER": "real words from the shell"},
        "MUMBAI_DEPLOYER=your_mnemonic\nMUMBAI_ENDPOINT=https://rpc.example.org\n",
    )
    assert env_config.check_env_file("mumbai") is True
    assert env_config.validate_all("mumbai") is True
    assert "placeholder" not in recording_console.file.getvalue()


def test_empty_environment_value_does_not_override_placeholder(tmp_path, recording_console):
    env_config = _env_config(
        tmp_path,
        recording_console,
        {"MUMBAI_DEPLOYER": ""},
        "MUMBAI_DEPLOYER=your_mnemonic\nMUMBAI_ENDPOINT=https://rpc.example.org\n",
    )
    assert env_config.check_env_file("mumbai") is False


def test_placeholder_for_other_network_ignored(tmp_path, recording_console):
    env_config = _env_config(
        tmp_path,
        recording_console,
        {},
        "MATIC_DEPLOYER_FINAL=your_mnemonic\n"
        "MUMBAI_DEPLOYER=real words\nMUMBAI_ENDPOINT=https://rpc.example.org\n",
    )
    assert env_config.validate_all("mumbai") is True


def test_missing_variables_reported_by_name(tmp_path, recording_console):
    env_config = _env_config(tmp_path, recording_console, {"MATIC_DEPLOYER_FINAL": MATIC_MNEMONIC})
    assert env_config.validate_network("matic") is False

    output = recording_console.file.getvalue()
    assert "MATIC_ENDPOINT_FINAL" in output
    assert MATIC_MNEMONIC not in output


def test_environment_info_never_contains_values(tmp_path, recording_console, full_env):
    env_config = _env_config(tmp_path, recording_console, full_env)
    info = env_config.get_environment_info()
    assert info["variables"] == {
        "MATIC_DEPLOYER_FINAL": True,
        "MATIC_ENDPOINT_FINAL": True,
        "MUMBAI_DEPLOYER": True,
        "MUMBAI_ENDPOINT": True,
    }

    assert env_config.validate_all("matic", show_summary=True) is True
    output = recording_console.file.getvalue()
    assert "Environment Summary" in output
    for value in full_env.values():
        assert value not in output


def test_environment_info_reads_env_file(tmp_path, recording_console):
    env_config = _env_config(
        tmp_path,
        recording_console,
        {},
        "MUMBAI_DEPLOYER=real words\nMUMBAI_ENDPOINT=https://rpc.example.org\n",
    )
    variables = env_config.get_environment_info()["variables"]
    assert variables["MUMBAI_DEPLOYER"] is True
    assert variables["MATIC_DEPLOYER_FINAL"] is False
