"""Command-line interface for trickgraph."""

import logging
import sys
from pathlib import Path

import click

from .diagnostics.runner import diagnose_combo_file
from .output.formatter import format_chips_json, format_diagnostic_result
from .schema.errors import ComboError, ComboLoadError
from .schema.loader import dump_combo, load_combo
from .sequence import editor
from .sequence.chips import render_text, sequence_to_chips
from .sequence.projector import graph_to_sequence, sequence_to_graph

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(level.upper())


def _load_or_exit(combo_file: str):
    try:
        return load_combo(combo_file)
    except ComboLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except ComboError as e:
        click.echo(f"Could not process combo: {e}", err=True)
        sys.exit(2)


def _id_at(ids: tuple[str, ...], position: int, what: str) -> str:
    if not 0 <= position < len(ids):
        raise click.BadParameter(
            f"{what} position {position} is out of range (0..{len(ids) - 1})"
        )
    return ids[position]


def _split_pair(value: str, separator: str, option: str) -> tuple[str, str]:
    if separator not in value:
        raise click.BadParameter(f"expected A{separator}B, got '{value}'", param_hint=option)
    left, right = value.split(separator, 1)
    return left, right


def _parse_position(value: str, option: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise click.BadParameter(f"'{value}' is not a position", param_hint=option) from e


@click.group()
@click.version_option(package_name="trickgraph")
@click.option(
    "--log-level",
    envvar="TRICKGRAPH_LOG_LEVEL",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default="warning",
    show_default=True,
    help="Logging level (defaults to TRICKGRAPH_LOG_LEVEL env var)",
)
def main(log_level: str):
    """trickgraph: validate, render and edit trick combos."""
    _configure_logging(log_level)


@main.command()
@click.argument("combo_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(combo_file: str, output_format: str, strict: bool):
    """Report every structural problem in a stored combo file.

    COMBO_FILE is the path to a YAML or JSON combo.

    Exit codes:
      0 - Combo is valid
      1 - Problems found
      2 - File error
    """
    try:
        result = diagnose_combo_file(combo_file)
    except ComboLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)

    output = format_diagnostic_result(result, output_format)  # type: ignore
    click.echo(output)

    if result.has_errors:
        sys.exit(1)
    elif strict and result.has_warnings:
        sys.exit(1)
    else:
        sys.exit(0)


@main.command()
@click.argument("combo_file", type=click.Path(exists=True))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--plain-arrows/--no-plain-arrows",
    default=False,
    help="Emit a chip for arrows without a transition (json only)",
)
def render(combo_file: str, output_format: str, plain_arrows: bool):
    """Render a combo file as chips.

    COMBO_FILE is the path to a YAML or JSON combo.

    Exit codes:
      0 - Success
      2 - File or combo error
    """
    combo = _load_or_exit(combo_file)

    try:
        sequence = graph_to_sequence(combo)
    except ComboError as e:
        click.echo(f"Could not process combo: {e}", err=True)
        sys.exit(2)

    if output_format == "json":
        chips = sequence_to_chips(sequence, include_plain_arrows=plain_arrows)
        click.echo(format_chips_json(chips))
    else:
        click.echo(render_text(sequence))
    sys.exit(0)


@main.command()
@click.argument("combo_file", type=click.Path(exists=True))
@click.option(
    "--remove",
    "removals",
    multiple=True,
    type=int,
    help="Remove the trick at POSITION",
)
@click.option(
    "--move",
    "moves",
    multiple=True,
    help="Move a trick, as FROM:TO trick positions",
)
@click.option(
    "--transition",
    "transitions",
    multiple=True,
    help="Set the transition after trick POSITION, as POSITION=ID (empty ID clears)",
)
@click.option(
    "--stance",
    "stances",
    multiple=True,
    help="Set the landing stance of trick POSITION, as POSITION=STANCE",
)
@click.option(
    "--append",
    "appends",
    multiple=True,
    help="Append a movement, as MOVEMENT or MOVEMENT:STANCE",
)
@click.option(
    "--output",
    "output_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the result here instead of stdout",
)
def edit(
    combo_file: str,
    removals: tuple[int, ...],
    moves: tuple[str, ...],
    transitions: tuple[str, ...],
    stances: tuple[str, ...],
    appends: tuple[str, ...],
    output_file: str | None,
):
    """Edit a combo file and print the re-marshalled result.

    COMBO_FILE is the path to a YAML or JSON combo.

    Edits apply in this order: removals (positions in the original combo),
    moves, transitions, stances, then appends. Each later step sees the
    positions produced by the earlier ones.

    Exit codes:
      0 - Success
      2 - File or combo error
    """
    combo = _load_or_exit(combo_file)

    try:
        sequence = graph_to_sequence(combo)

        original = editor.trick_ids(sequence)
        for position in sorted(set(removals), reverse=True):
            sequence = editor.remove_trick(
                sequence, _id_at(original, position, "Trick")
            )

        for value in moves:
            source, target = _split_pair(value, ":", "--move")
            item_id = _id_at(
                editor.trick_ids(sequence), _parse_position(source, "--move"), "Trick"
            )
            sequence = editor.move_trick(
                sequence, item_id, _parse_position(target, "--move")
            )

        for value in transitions:
            position, transition_id = _split_pair(value, "=", "--transition")
            item_id = _id_at(
                editor.arrow_ids(sequence),
                _parse_position(position, "--transition"),
                "Transition",
            )
            sequence = editor.set_transition(sequence, item_id, transition_id)

        for value in stances:
            position, stance = _split_pair(value, "=", "--stance")
            item_id = _id_at(
                editor.trick_ids(sequence), _parse_position(position, "--stance"), "Trick"
            )
            sequence = editor.set_landing_stance(sequence, item_id, stance)

        for value in appends:
            movement_id, _, stance = value.partition(":")
            sequence = editor.append_movement(
                sequence, {"movement_id": movement_id, "landing_stance": stance or None}
            )

        output = dump_combo(sequence_to_graph(sequence))
    except ComboError as e:
        click.echo(f"Could not process combo: {e}", err=True)
        sys.exit(2)

    if output_file:
        Path(output_file).write_text(output, encoding="utf-8")
        click.echo(f"Wrote: {output_file}")
    else:
        click.echo(output, nl=False)
    sys.exit(0)


if __name__ == "__main__":
    main()
