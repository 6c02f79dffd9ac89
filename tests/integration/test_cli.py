"""Integration tests for CLI."""

import json

import pytest
import yaml
from click.testing import CliRunner

from trickgraph.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestValidateCommand:
    def test_validate_valid_file(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "vanish_chain.yaml")]
        )

        assert result.exit_code == 0
        assert "Combo is valid" in result.output

    def test_validate_with_errors(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "broken_edges.yaml")]
        )

        assert result.exit_code == 1
        assert "NON_CONSECUTIVE_EDGE" in result.output

    def test_validate_with_warnings(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "repeated_movement.yaml")]
        )

        assert result.exit_code == 0
        assert "REPEATED_MOVEMENT" in result.output

    def test_validate_strict_mode(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "repeated_movement.yaml"), "--strict"],
        )

        assert result.exit_code == 1

    def test_validate_json_output(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["validate", str(examples_dir / "gainer_cork.yaml"), "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["valid"] is True
        assert data["issues"] == []

    def test_validate_nonexistent_file(self, runner):
        result = runner.invoke(main, ["validate", "/nonexistent/combo.yaml"])

        assert result.exit_code == 2

    def test_validate_non_mapping_file(self, runner, examples_dir):
        result = runner.invoke(
            main, ["validate", str(examples_dir / "invalid" / "not_a_mapping.yaml")]
        )

        assert result.exit_code == 2


class TestRenderCommand:
    def test_render_text(self, runner, examples_dir):
        result = runner.invoke(main, ["render", str(examples_dir / "gainer_cork.yaml")])

        assert result.exit_code == 0
        assert result.output.strip() == "gainer → cork (complete)"

    def test_render_json(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["render", str(examples_dir / "vanish_chain.yaml"), "--format", "json"],
        )

        assert result.exit_code == 0
        labels = [chip["label"] for chip in json.loads(result.output)]
        assert labels == [
            "cartwheel",
            "vanish",
            "gainer (hyper)",
            "cork (complete)",
            "swing_through",
            "double_leg",
        ]

    def test_render_legacy_file(self, runner, examples_dir):
        result = runner.invoke(main, ["render", str(examples_dir / "legacy_nodes.json")])

        assert result.exit_code == 0
        assert "[punch]" in result.output

    def test_render_invalid_combo(self, runner, examples_dir):
        result = runner.invoke(
            main, ["render", str(examples_dir / "invalid" / "broken_edges.yaml")]
        )

        assert result.exit_code == 2
        assert "Could not process combo" in result.output


class TestEditCommand:
    def test_append_and_transition(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "edit",
                str(examples_dir / "gainer_cork.yaml"),
                "--transition",
                "0=vanish",
                "--append",
                "raiz:semi",
            ],
        )

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["tricks"] == [
            {"movement_id": "gainer"},
            {"movement_id": "cork", "landing_stance": "complete"},
            {"movement_id": "raiz", "landing_stance": "semi"},
        ]
        assert data["transitions"] == [
            {"from_index": 0, "to_index": 1, "transition_id": "vanish"},
            {"from_index": 1, "to_index": 2},
        ]

    def test_remove_and_move(self, runner, examples_dir):
        result = runner.invoke(
            main,
            [
                "edit",
                str(examples_dir / "vanish_chain.yaml"),
                "--remove",
                "1",
                "--move",
                "2:0",
                "--stance",
                "1=semi",
            ],
        )

        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert [t["movement_id"] for t in data["tricks"]] == [
            "double_leg",
            "cartwheel",
            "cork",
        ]
        assert data["tricks"][1]["landing_stance"] == "semi"
        assert len(data["transitions"]) == 2

    def test_removing_everything_fails(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["edit", str(examples_dir / "gainer_cork.yaml"), "--remove", "0", "--remove", "1"],
        )

        assert result.exit_code == 2
        assert "at least one movement" in result.output

    def test_position_out_of_range(self, runner, examples_dir):
        result = runner.invoke(
            main, ["edit", str(examples_dir / "gainer_cork.yaml"), "--remove", "5"]
        )

        assert result.exit_code == 2

    def test_write_output_file(self, runner, examples_dir, tmp_path):
        out = tmp_path / "edited.yaml"
        result = runner.invoke(
            main,
            [
                "edit",
                str(examples_dir / "gainer_cork.yaml"),
                "--append",
                "btwist",
                "--output",
                str(out),
            ],
        )

        assert result.exit_code == 0
        data = yaml.safe_load(out.read_text())
        assert data["tricks"][-1] == {"movement_id": "btwist"}


class TestLogLevel:
    def test_log_level_from_env(self, runner, examples_dir):
        result = runner.invoke(
            main,
            ["render", str(examples_dir / "gainer_cork.yaml")],
            env={"TRICKGRAPH_LOG_LEVEL": "debug"},
        )

        assert result.exit_code == 0

    def test_invalid_log_level(self, runner, examples_dir):
        result = runner.invoke(
            main, ["--log-level", "loud", "render", str(examples_dir / "gainer_cork.yaml")]
        )

        assert result.exit_code == 2
