import os

import click
import pytest
from click.testing import CliRunner

from bedrock_pack_exporter.__main__ import cli
from bedrock_pack_exporter.cli.export import build_settings


@pytest.fixture
def runner():
    return CliRunner()


class TestBuildSettings:
    def test_json_only(self):
        assert build_settings('{"target": "mcaddon", "exclude": ["RP"]}', None, None, ()) == {
            "target": "mcaddon",
            "exclude": ["RP"],
        }

    def test_options_override_json(self):
        settings = build_settings(
            '{"target": "mcaddon", "name": "A"}', "B", "mcworld", ("BP",)
        )
        assert settings == {"target": "mcworld", "name": "B", "exclude": ["BP"]}

    @pytest.mark.parametrize("raw", ["{oops", '["mcaddon"]'])
    def test_bad_json(self, raw):
        with pytest.raises(click.BadParameter):
            build_settings(raw, None, None, ())


class TestExportCommand:
    def test_export(self, runner, project):
        result = runner.invoke(
            cli, ["export", '{"target": "mcaddon"}', "-w", str(project.working_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "[OK]" in result.output
        assert os.path.isfile(project.build_dir / "my map title.mcaddon")

    def test_export_with_options(self, runner, project, tmp_path):
        out = tmp_path / "dist"
        result = runner.invoke(
            cli,
            [
                "export",
                "--target",
                "mcworld",
                "--name",
                "Release",
                "-x",
                "RP",
                "-w",
                str(project.working_dir),
                "-o",
                str(out),
            ],
        )

        assert result.exit_code == 0, result.output
        assert os.path.isfile(out / "Release.mcworld")

    def test_export_error_aborts(self, runner, project):
        result = runner.invoke(
            cli, ["export", "--target", "zip", "-w", str(project.working_dir)]
        )

        assert result.exit_code == 1
        assert "No valid export target defined" in result.output
        assert not project.build_dir.exists()

    def test_invalid_settings_json(self, runner, project):
        result = runner.invoke(cli, ["export", "{oops", "-w", str(project.working_dir)])
        assert result.exit_code == 2
        assert "SETTINGS" in result.output

    def test_export_calls_api(self, runner, project, mocker):
        mock_api = mocker.patch(
            "bedrock_pack_exporter.cli.export.export_api.export_api",
            return_value={"status": "success", "message": "done"},
        )
        result = runner.invoke(cli, ["export", "-t", "mcaddon", "-x", "bp", "-x", "rp"])

        assert result.exit_code == 0, result.output
        mock_api.assert_called_once_with(
            {"target": "mcaddon", "exclude": ["bp", "rp"]},
            working_dir=None,
            output_dir=None,
        )


class TestPlanCommand:
    def test_plan(self, runner, project):
        result = runner.invoke(
            cli, ["plan", "-t", "mctemplate", "-x", "RP", "-w", str(project.working_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "my map title" in result.output
        assert "Excluded:" in result.output
        assert "my map title.mctemplate" in result.output
        assert not project.build_dir.exists()

    def test_plan_error(self, runner, project):
        project.write_config({"name": "x", "packs": {"behaviorPack": "./gone"}})
        result = runner.invoke(cli, ["plan", "-t", "mcaddon", "-w", str(project.working_dir)])

        assert result.exit_code == 1
        assert "No valid behaviorPack path defined." in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
