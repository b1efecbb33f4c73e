"""CLI commands driven through click's CliRunner against the mock server."""

import json

import pytest
from click.testing import CliRunner

from conduit_client import Connection
from conduit_client.cli import config as cli_config
from conduit_client.cli import main as cli_main
from conduit_client.cli.config import CliConfig

from tests.conftest import API_TOKEN, ENDPOINT


@pytest.fixture
def cli(server, tmp_path, monkeypatch):
    monkeypatch.setattr(cli_config, "CONFIG_FILE", tmp_path / "config.json")
    monkeypatch.delenv(cli_config.ENDPOINT_ENV, raising=False)
    monkeypatch.delenv(cli_config.TOKEN_ENV, raising=False)
    monkeypatch.setattr(
        cli_main, "Connection",
        lambda endpoint, **kwargs: Connection(endpoint, transport=server.transport, **kwargs),
    )
    return CliRunner()


@pytest.fixture
def logged_in(cli):
    CliConfig(endpoint=ENDPOINT, api_token=API_TOKEN, user_name="alice").save()
    return cli


def test_call_requires_login(cli):
    result = cli.invoke(cli_main.main, ["call", "conduit.ping", "{}"])
    assert result.exit_code == 1
    assert "Not logged in" in result.output


def test_login_saves_token(cli, server):
    server.register_result("user.whoami", {"phid": "PHID-USER-abc", "userName": "alice"})
    result = cli.invoke(cli_main.main, ["auth", "login", "--endpoint", ENDPOINT], input=f"{API_TOKEN}\n")
    assert result.exit_code == 0, result.output
    assert "Authenticated as alice" in result.output
    saved = CliConfig.load()
    assert saved.api_token == API_TOKEN
    assert saved.endpoint == ENDPOINT
    assert saved.user_name == "alice"
    assert "source" not in json.loads(cli_config.CONFIG_FILE.read_text())


def test_login_with_bad_token(cli, server):
    server.register_method(
        "user.whoami", 200,
        {"result": None, "error_code": "ERR-INVALID-AUTH", "error_info": "API token is not valid."},
    )
    result = cli.invoke(cli_main.main, ["auth", "login", "--endpoint", ENDPOINT], input="bad\n")
    assert result.exit_code == 1
    assert "ERR-INVALID-AUTH" in result.output
    assert not cli_config.CONFIG_FILE.exists()


def test_status_and_logout(logged_in):
    result = logged_in.invoke(cli_main.main, ["auth", "status"])
    assert result.exit_code == 0, result.output
    assert "alice" in result.output
    assert "file" in result.output
    assert API_TOKEN not in result.output

    result = logged_in.invoke(cli_main.main, ["auth", "logout"])
    assert "removed" in result.output
    assert not cli_config.CONFIG_FILE.exists()

    result = logged_in.invoke(cli_main.main, ["auth", "status"])
    assert "No credentials" in result.output

    result = logged_in.invoke(cli_main.main, ["auth", "logout"])
    assert "No saved credentials" in result.output


def test_env_credentials_resolve_without_file(monkeypatch, cli):
    monkeypatch.setenv(cli_config.ENDPOINT_ENV, ENDPOINT)
    monkeypatch.setenv(cli_config.TOKEN_ENV, "api-from-environment")
    cfg = CliConfig.resolve()
    assert cfg.logged_in
    assert cfg.source == "env"
    assert cfg.api_token == "api-from-environment"


def test_corrupt_config_file_means_logged_out(cli):
    cli_config.CONFIG_FILE.write_text("{not json")
    assert not CliConfig.load().logged_in


def test_call_typed_method(logged_in, server):
    server.register_result("user.whoami", {"phid": "PHID-USER-abc", "userName": "alice"})
    result = logged_in.invoke(cli_main.main, ["call", "user.whoami"], input="")
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["userName"] == "alice"
    assert payload["phid"] == "PHID-USER-abc"


def test_call_untyped_method_with_stdin_params(logged_in, server):
    server.register_result("maniphest.info", {"id": "1", "title": "Fix it"})
    result = logged_in.invoke(cli_main.main, ["call", "maniphest.info"], input='{"task_id": 1}')
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"id": "1", "title": "Fix it"}
    assert server.last_params("maniphest.info")["task_id"] == 1


def test_call_api_error(logged_in, server):
    server.register_method(
        "maniphest.info", 200,
        {"result": None, "error_code": "ERR_BAD_TASK", "error_info": "No such Maniphest task exists."},
    )
    result = logged_in.invoke(cli_main.main, ["call", "maniphest.info", '{"task_id": 999}'])
    assert result.exit_code == 1
    assert "ERR_BAD_TASK" in result.output


def test_call_rejects_bad_json(logged_in):
    result = logged_in.invoke(cli_main.main, ["call", "conduit.ping", "{nope"])
    assert result.exit_code == 2


def test_env_overrides_config(cli, server, monkeypatch):
    monkeypatch.setenv(cli_config.ENDPOINT_ENV, ENDPOINT)
    monkeypatch.setenv(cli_config.TOKEN_ENV, "env-token")
    server.register_result("conduit.ping", "phab01")
    result = cli.invoke(cli_main.main, ["call", "conduit.ping", "{}"])
    assert result.exit_code == 0, result.output
    assert server.last_params("conduit.ping")["__conduit__"] == {"token": "env-token"}


def test_capabilities_json(logged_in):
    result = logged_in.invoke(cli_main.main, ["capabilities", "--json"])
    assert result.exit_code == 0, result.output
    assert "token" in json.loads(result.output)["authentication"]


def test_methods_table(logged_in, server):
    server.register_result("conduit.query", {
        "conduit.ping": {"description": "Ping.", "params": [], "return": "string"},
        "user.whoami": {"description": "Me.", "params": [], "return": "dict"},
    })
    result = logged_in.invoke(cli_main.main, ["methods", "--filter", "ping"])
    assert result.exit_code == 0, result.output
    assert "conduit.ping" in result.output
    assert "user.whoami" not in result.output


def test_call_keeps_params_unknown_to_the_request_model(logged_in, server):
    server.register_result("user.query", [])
    result = logged_in.invoke(cli_main.main, ["call", "user.query", '{"usernames": ["alice"], "isDisabled": true}'])
    assert result.exit_code == 0, result.output
    params = server.last_params("user.query")
    assert params["usernames"] == ["alice"]
    assert params["isDisabled"] is True
