import json
import sys
from pathlib import Path

from omod_init.__main__ import cli, main
from omod_init.constants import PROJECT_FILENAME


def test_plan_does_not_write_descriptor(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["plan", str(conventional_module)])

    assert result.exit_code == 0
    assert "module.hbm.xml" in result.output
    assert "create" in result.output
    assert not (conventional_module / PROJECT_FILENAME).exists()


def test_apply_writes_resources_and_properties(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["apply", str(conventional_module)])

    assert result.exit_code == 0
    payload = json.loads(
        (conventional_module / PROJECT_FILENAME).read_text(encoding="utf-8")
    )
    assert payload["resources"][-1] == {
        "directory": "src/main/resources",
        "filtering": True,
        "includes": ["config.xml"],
    }
    assert payload["properties"] == {
        "hbmConfig": '<mapping resource="module.hbm.xml" />\n',
        "omodHbmConfig": "module.hbm.xml\n",
    }


def test_apply_twice_reports_nothing_to_do(conventional_module: Path, cli_runner) -> None:
    cli_runner.invoke(cli, ["apply", str(conventional_module)])
    first = (conventional_module / PROJECT_FILENAME).read_text(encoding="utf-8")

    result = cli_runner.invoke(cli, ["apply", str(conventional_module)])

    assert result.exit_code == 0
    assert "already initialized" in result.output
    assert (conventional_module / PROJECT_FILENAME).read_text(encoding="utf-8") == first


def test_apply_with_setting_override(conventional_module: Path, cli_runner) -> None:
    (conventional_module / "src" / "main" / "webapp").mkdir(parents=True)

    result = cli_runner.invoke(
        cli,
        ["apply", str(conventional_module), "--set", "webapp_target=web/custom"],
    )

    assert result.exit_code == 0
    payload = json.loads(
        (conventional_module / PROJECT_FILENAME).read_text(encoding="utf-8")
    )
    assert {
        "directory": "src/main/webapp",
        "filtering": False,
        "target_path": "web/custom",
    } in payload["resources"]


def test_apply_with_backup(conventional_module: Path, cli_runner, write_json) -> None:
    write_json(conventional_module / PROJECT_FILENAME, {"name": "reporting"})

    result = cli_runner.invoke(cli, ["apply", str(conventional_module), "--backup"])

    assert result.exit_code == 0
    backups = list(conventional_module.glob(f"{PROJECT_FILENAME}.bak-*"))
    assert len(backups) == 1


def test_properties_prints_single_value(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["properties", str(conventional_module), "--name", "hbmConfig"]
    )

    assert result.exit_code == 0
    assert result.output == '<mapping resource="module.hbm.xml" />\n'


def test_properties_prints_both_values(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["properties", str(conventional_module)])

    assert result.exit_code == 0
    assert result.output == (
        "hbmConfig:\n"
        '<mapping resource="module.hbm.xml" />\n'
        "omodHbmConfig:\n"
        "module.hbm.xml\n"
    )


def test_properties_unknown_name(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["properties", str(conventional_module), "--name", "other"]
    )

    assert result.exit_code != 0
    assert "Unknown property" in result.output


def test_properties_uses_custom_property_name(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "properties",
            str(conventional_module),
            "--set",
            "omod_descriptor_property=mappings",
            "--name",
            "mappings",
        ],
    )

    assert result.exit_code == 0
    assert result.output == "module.hbm.xml\n"


def test_unknown_setting_fails(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["plan", str(conventional_module), "--set", "bogus=1"]
    )

    assert result.exit_code != 0
    assert "Unknown setting" in result.output


def test_malformed_setting_fails(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["plan", str(conventional_module), "--set", "webapp_target"]
    )

    assert result.exit_code != 0
    assert "KEY=VALUE" in result.output


def test_invalid_descriptor_fails(conventional_module: Path, cli_runner) -> None:
    (conventional_module / PROJECT_FILENAME).write_text("{bad", encoding="utf-8")

    result = cli_runner.invoke(cli, ["plan", str(conventional_module)])

    assert result.exit_code != 0
    assert "Invalid JSON format" in result.output


def test_invalid_template_fails(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        ["apply", str(conventional_module), "--set", "descriptor_format={1}"],
    )

    assert result.exit_code != 0
    assert "Invalid descriptor format" in result.output
    assert not (conventional_module / PROJECT_FILENAME).exists()


def test_missing_project_directory_fails(tmp_path: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["plan", str(tmp_path / "missing")])

    assert result.exit_code != 0
    assert "Missing project directory" in result.output


def test_verbose_flag_accepted(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["-v", "plan", str(conventional_module)])

    assert result.exit_code == 0


def test_template_attribute_lookup_fails_cleanly(conventional_module: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli,
        ["properties", str(conventional_module), "--set", "descriptor_format={0.nope}"],
    )

    assert result.exit_code != 0
    assert not isinstance(result.exception, AttributeError)
    assert "Invalid descriptor format" in result.output


def test_parent_segment_pattern_fails_cleanly(conventional_module: Path, write_json, cli_runner) -> None:
    write_json(
        conventional_module / PROJECT_FILENAME,
        {
            "initializer": {
                "descriptor_groups": [
                    {"directory": "src/main/resources", "includes": ["../../*.xml"]}
                ]
            }
        },
    )

    result = cli_runner.invoke(cli, ["properties", str(conventional_module)])

    assert result.exit_code != 0
    assert "Invalid file pattern" in result.output


def test_main_returns_two_on_module_error(conventional_module: Path, monkeypatch) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        ["omod-init", "properties", str(conventional_module), "--set", "descriptor_format={1}"],
    )

    assert main() == 2
