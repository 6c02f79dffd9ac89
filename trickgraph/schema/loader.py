"""Loading combo files from disk."""

import json
from pathlib import Path
from typing import Any

import yaml

from .errors import ComboLoadError
from .marshal import marshal_combo, unmarshal_combo
from .models import ComboGraph

JSON_SUFFIXES = {".json"}


def _parse_text(text: str, as_json: bool) -> Any:
    if as_json:
        try:
            return json.loads(text) if text.strip() else None
        except json.JSONDecodeError as e:
            raise ComboLoadError(
                f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ComboLoadError(f"Invalid YAML: {e}") from e


def load_payload(path: str | Path) -> dict:
    """Read a stored combo and return the raw payload.

    ``.json`` files are parsed strictly as JSON, so a stray trailing comma
    is reported rather than read as YAML. Anything else is read as YAML.
    An empty file gives an empty payload, which unmarshalling then rejects.

    Raises:
        ComboLoadError: If the file is missing, unreadable, unparsable or
            its top level is not a mapping.
    """
    path = Path(path)

    if not path.is_file():
        reason = "Not a file" if path.exists() else "File not found"
        raise ComboLoadError(f"{reason}: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ComboLoadError(f"Cannot read file: {e}", str(path)) from e

    try:
        data = _parse_text(text, path.suffix.lower() in JSON_SUFFIXES)
    except ComboLoadError as e:
        raise ComboLoadError(f"{e} ({path.name})", str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ComboLoadError(
            f"Expected a combo mapping in {path.name}, got {type(data).__name__}",
            str(path),
        )
    return data


def load_combo(path: str | Path) -> ComboGraph:
    """Load and unmarshal a combo file.

    Raises:
        ComboLoadError: If the file cannot be read or parsed.
        ComboError: If the payload fails unmarshalling.
    """
    return unmarshal_combo(load_payload(path))


def parse_combo_from_string(text: str) -> ComboGraph:
    """Parse a YAML or JSON string into a ComboGraph.

    Raises:
        ComboLoadError: If the text cannot be parsed.
        ComboError: If the payload fails unmarshalling.
    """
    data = _parse_text(text, as_json=False)
    if data is not None and not isinstance(data, dict):
        raise ComboLoadError(f"Expected a mapping at root, got {type(data).__name__}")

    return unmarshal_combo(data)


def dump_combo(graph: ComboGraph) -> str:
    """Marshal a combo and render it as YAML."""
    return yaml.safe_dump(marshal_combo(graph), sort_keys=False)
