"""Tests for combo file loading."""

import pytest

from trickgraph.schema.errors import ComboLoadError, InvalidMovementIdError
from trickgraph.schema.loader import (
    dump_combo,
    load_combo,
    load_payload,
    parse_combo_from_string,
)


class TestLoadPayload:
    def test_load_valid_yaml(self, tmp_path):
        combo_file = tmp_path / "combo.yaml"
        combo_file.write_text("tricks:\n  - movement_id: gainer\n")

        data = load_payload(combo_file)
        assert data == {"tricks": [{"movement_id": "gainer"}]}

    def test_load_json(self, examples_dir):
        data = load_payload(examples_dir / "legacy_nodes.json")
        assert "nodes" in data

    def test_file_not_found(self):
        with pytest.raises(ComboLoadError) as exc_info:
            load_payload("/nonexistent/combo.yaml")
        assert "not found" in str(exc_info.value).lower()

    def test_directory_rejected(self, tmp_path):
        with pytest.raises(ComboLoadError):
            load_payload(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        combo_file = tmp_path / "invalid.yaml"
        combo_file.write_text("tricks: [unclosed")

        with pytest.raises(ComboLoadError) as exc_info:
            load_payload(combo_file)
        assert "Invalid YAML" in str(exc_info.value)

    def test_json_file_is_parsed_as_json(self, tmp_path):
        combo_file = tmp_path / "combo.json"
        combo_file.write_text('{"tricks": [{"movement_id": "gainer"},]}')

        with pytest.raises(ComboLoadError) as exc_info:
            load_payload(combo_file)
        message = str(exc_info.value)
        assert message.startswith("Invalid JSON at line 1")
        assert "combo.json" in message
        assert exc_info.value.path == str(combo_file)

    def test_empty_json_file_returns_empty_dict(self, tmp_path):
        combo_file = tmp_path / "empty.json"
        combo_file.write_text("  \n")

        assert load_payload(combo_file) == {}

    def test_empty_file_returns_empty_dict(self, tmp_path):
        combo_file = tmp_path / "empty.yaml"
        combo_file.write_text("")

        assert load_payload(combo_file) == {}

    def test_non_mapping_at_root(self, examples_dir):
        with pytest.raises(ComboLoadError) as exc_info:
            load_payload(examples_dir / "invalid" / "not_a_mapping.yaml")
        assert "mapping" in str(exc_info.value).lower()


class TestLoadCombo:
    def test_load_example(self, examples_dir):
        combo = load_combo(examples_dir / "vanish_chain.yaml")
        assert combo.get_movement_ids() == ["cartwheel", "gainer", "cork", "double_leg"]
        assert combo.get_transition(2) == "swing_through"

    def test_load_legacy_example(self, examples_dir):
        combo = load_combo(examples_dir / "legacy_nodes.json")
        assert combo.tricks[1].landing_stance == "semi"

    def test_load_invalid_example(self, examples_dir):
        with pytest.raises(InvalidMovementIdError):
            load_combo(examples_dir / "invalid" / "empty_movement.yaml")


class TestParseFromString:
    def test_parse_yaml(self):
        combo = parse_combo_from_string(
            """
tricks:
  - movement_id: gainer
  - movement_id: cork
transitions:
  - from_index: 0
    to_index: 1
    transition_id: vanish
"""
        )
        assert combo.get_transition(0) == "vanish"

    def test_invalid_yaml_string(self):
        with pytest.raises(ComboLoadError):
            parse_combo_from_string("tricks: [yaml")

    def test_dump_round_trips(self, chain_graph):
        assert parse_combo_from_string(dump_combo(chain_graph)) == chain_graph
