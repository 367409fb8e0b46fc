"""End-to-end smoke tests for the Typer-based authorship CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from authorship.cli.common import merge_overrides, parse_override
from authorship.cli.main import app

DEFAULT = "Foo Bar <noreply@foobar.com>"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def cli_env(tmp_path: Path) -> dict[str, str]:
    return {
        "AUTHORSHIP_CONFIG_DIR": str(tmp_path / "config"),
        "AUTHORSHIP_CREATE_DIRS": "false",
    }


def _write_policy(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "authoring.yaml"
    path.write_text(yaml.safe_dump({"authoring": payload}), encoding="utf-8")
    return path


@pytest.fixture()
def whitelisted_policy(tmp_path: Path) -> Path:
    return _write_policy(
        tmp_path,
        {"mode": "whitelisted", "default": DEFAULT, "whitelist": ["alice@x.com", "bob@x.com"]},
    )


def test_parse_override_builds_nested_mapping() -> None:
    assert parse_override("authoring.mode=overwrite") == {"authoring": {"mode": "overwrite"}}
    assert parse_override('authoring.whitelist=["a"]') == {"authoring": {"whitelist": ["a"]}}
    merged = merge_overrides(
        [parse_override("authoring.mode=overwrite"), parse_override("log_level=DEBUG")]
    )
    assert merged == {"authoring": {"mode": "overwrite"}, "log_level": "DEBUG"}


def test_decide_reports_origin_or_default(
    runner: CliRunner, cli_env: dict[str, str], whitelisted_policy: Path
) -> None:
    result = runner.invoke(
        app,
        ["-c", str(whitelisted_policy), "policy", "decide", "alice@x.com", "carol@x.com"],
        env=cli_env,
    )
    assert result.exit_code == 0, result.output
    assert "alice@x.com: origin" in result.output
    assert "carol@x.com: default" in result.output


def test_show_renders_policy(
    runner: CliRunner, cli_env: dict[str, str], whitelisted_policy: Path
) -> None:
    result = runner.invoke(app, ["-c", str(whitelisted_policy), "policy", "show"], env=cli_env)
    assert result.exit_code == 0, result.output
    assert "WHITELISTED" in result.output
    assert DEFAULT in result.output
    assert "alice@x.com, bob@x.com" in result.output


def test_resolve_prints_destination_author(
    runner: CliRunner, cli_env: dict[str, str], whitelisted_policy: Path
) -> None:
    accepted = runner.invoke(
        app,
        ["-c", str(whitelisted_policy), "policy", "resolve", "alice@x.com", "-a", "Alice <alice@x.com>"],
        env=cli_env,
    )
    assert accepted.exit_code == 0, accepted.output
    assert "Alice <alice@x.com>" in accepted.output

    rejected = runner.invoke(
        app,
        ["-c", str(whitelisted_policy), "policy", "resolve", "carol@x.com", "-a", "Carol <carol@x.com>"],
        env=cli_env,
    )
    assert rejected.exit_code == 0, rejected.output
    assert DEFAULT in rejected.output


def test_override_changes_mode(runner: CliRunner, cli_env: dict[str, str], tmp_path: Path) -> None:
    policy = _write_policy(tmp_path, {"mode": "pass_through", "default": DEFAULT})
    result = runner.invoke(
        app,
        ["-c", str(policy), "-o", "authoring.mode=overwrite", "policy", "decide", "alice@x.com"],
        env=cli_env,
    )
    assert result.exit_code == 0, result.output
    assert "alice@x.com: default" in result.output


def test_invalid_policy_exits_with_error(
    runner: CliRunner, cli_env: dict[str, str], tmp_path: Path
) -> None:
    policy = _write_policy(
        tmp_path, {"mode": "whitelisted", "default": DEFAULT, "whitelist": ["a", "b", "a"]}
    )
    result = runner.invoke(app, ["-c", str(policy), "policy", "show"], env=cli_env)
    assert result.exit_code == 2
    assert "Duplicated whitelist entry 'a'" in result.output


def test_missing_policy_file_exits_with_error(
    runner: CliRunner, cli_env: dict[str, str], tmp_path: Path
) -> None:
    result = runner.invoke(
        app, ["-c", str(tmp_path / "missing.yaml"), "policy", "show"], env=cli_env
    )
    assert result.exit_code == 2
    assert "Error:" in result.output


def test_entry_points_lists_constructors(runner: CliRunner, cli_env: dict[str, str]) -> None:
    result = runner.invoke(app, ["policy", "entry-points"], env=cli_env)
    assert result.exit_code == 0, result.output
    assert "overwrite(default)" in result.output
    assert "pass_through(default)" in result.output
    assert "whitelisted(default, whitelist)" in result.output


def test_unparseable_policy_file_exits_with_error(
    runner: CliRunner, cli_env: dict[str, str], tmp_path: Path
) -> None:
    policy = tmp_path / "broken.yaml"
    policy.write_text("authoring: [unclosed", encoding="utf-8")
    result = runner.invoke(app, ["-c", str(policy), "policy", "show"], env=cli_env)
    assert result.exit_code == 2
    assert "Error:" in result.output
    assert "not valid YAML" in result.output


def test_unparseable_config_directory_exits_with_error(
    runner: CliRunner, cli_env: dict[str, str], tmp_path: Path
) -> None:
    config_dir = Path(cli_env["AUTHORSHIP_CONFIG_DIR"])
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text("log_level: [unclosed", encoding="utf-8")
    result = runner.invoke(app, ["policy", "entry-points"], env=cli_env)
    assert result.exit_code == 2
    assert "Error:" in result.output


def test_policy_file_replaces_configured_section(
    runner: CliRunner, cli_env: dict[str, str], tmp_path: Path
) -> None:
    config_dir = Path(cli_env["AUTHORSHIP_CONFIG_DIR"])
    config_dir.mkdir()
    configured = {
        "authoring": {"mode": "whitelisted", "default": DEFAULT, "whitelist": ["alice@x.com"]}
    }
    (config_dir / "default.yaml").write_text(yaml.safe_dump(configured), encoding="utf-8")
    policy = _write_policy(tmp_path, {"mode": "pass_through", "default": DEFAULT})

    result = runner.invoke(
        app, ["-c", str(policy), "policy", "decide", "carol@x.com"], env=cli_env
    )
    assert result.exit_code == 0, result.output
    assert "carol@x.com: origin" in result.output
