"""Command-line interface for inspecting accessors built from raw data."""

from __future__ import annotations

import json
import math
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from gltf_accessors.log import configure_logging, get_logger
from gltf_accessors.model import AccessorError, AccessorModel, PackingInfo, calculate_packing, create

logger = get_logger(__name__)


@click.group()
@click.option("--verbose", "-v", count=True, help="Increase log verbosity (-v info, -vv debug)")
def cli(verbose: int) -> None:
    """glTF accessor builder and packing calculator."""
    configure_logging(verbose)


def _build(component: str, element: str, input_file: str) -> AccessorModel:
    try:
        data = Path(input_file).read_bytes()
        logger.info("Read %d bytes from %s", len(data), input_file)
        return create(component, element, data)
    except (OSError, AccessorError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def _format_values(values: list) -> str:
    return ", ".join(f"{v:g}" if isinstance(v, float) else str(v) for v in values)


def _json_values(values: list) -> list:
    """Replace NaN and infinite components, which JSON cannot represent, with None."""
    return [None if isinstance(v, float) and not math.isfinite(v) else v for v in values]


@cli.command()
@click.option("--component", "-c", required=True, help="Component type (e.g. float, unsigned_short, 5126)")
@click.option("--type", "-t", "element", required=True, help="Element type (SCALAR, VEC2, VEC3, ...)")
@click.option("--input", "-i", "input_file", required=True, help="Raw binary data file")
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(component: str, element: str, input_file: str, output_json: bool) -> None:
    """Display the accessor described by a raw data file."""
    accessor = _build(component, element, input_file)

    if output_json:
        data = {
            "componentType": int(accessor.component_type),
            "componentTypeName": accessor.component_type.display_name,
            "type": accessor.element_type.value,
            "count": accessor.count,
            "elementSize": accessor.element_size_in_bytes,
            "byteLength": accessor.byte_length,
            "min": _json_values(accessor.compute_min()),
            "max": _json_values(accessor.compute_max()),
        }
        print(json.dumps(data, indent=2, allow_nan=False))
        return

    console = Console()
    console.print("[bold cyan]Accessor[/bold cyan]")

    table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    table.add_column("Label", style="dim")
    table.add_column("Value", style="white")

    table.add_row(
        "Component type",
        f"{accessor.component_type.display_name} ({int(accessor.component_type)})",
    )
    table.add_row("Element type", accessor.element_type.value)
    table.add_row("Count", str(accessor.count))
    table.add_row("Element size", f"{accessor.element_size_in_bytes} bytes")
    table.add_row("Byte length", f"{accessor.byte_length} bytes")
    if accessor.count:
        table.add_row("Min", _format_values(accessor.compute_min()))
        table.add_row("Max", _format_values(accessor.compute_max()))

    console.print(table)


def _parse_accessor_option(value: str) -> tuple[str, str, str]:
    parts = value.split(":", 2)
    if len(parts) != 3:
        raise click.BadParameter(f"Expected COMPONENT:TYPE:FILE, got {value!r}")
    return parts[0], parts[1], parts[2]


@cli.command()
@click.option(
    "--accessor",
    "-a",
    "accessor_args",
    multiple=True,
    required=True,
    help="Accessor as COMPONENT:TYPE:FILE (repeatable)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def pack(accessor_args: tuple[str, ...], output_json: bool) -> None:
    """Compute alignment and byte stride for accessors sharing one buffer."""
    accessors = [_build(*_parse_accessor_option(arg)) for arg in accessor_args]
    packing = calculate_packing(accessors)

    if output_json:
        print(json.dumps(packing.to_dict(), indent=2))
    else:
        _output_packing(packing, accessors)


def _output_packing(packing: PackingInfo, accessors: list[AccessorModel]) -> None:
    """Output packing info using rich text formatting."""
    console = Console()

    console.print("[bold cyan]Accessors[/bold cyan]")
    accessor_table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    accessor_table.add_column("#", style="dim", justify="right")
    accessor_table.add_column("Component", style="white")
    accessor_table.add_column("Type", style="white")
    accessor_table.add_column("Count", style="yellow", justify="right")
    accessor_table.add_column("Element size", style="yellow", justify="right")

    for index, accessor in enumerate(accessors):
        accessor_table.add_row(
            str(index),
            accessor.component_type.display_name,
            accessor.element_type.value,
            str(accessor.count),
            f"{accessor.element_size_in_bytes} bytes",
        )

    console.print(accessor_table)
    console.print()

    console.print("[bold cyan]Packing[/bold cyan]")
    packing_table = Table(show_header=False, box=None, padding=(0, 2, 0, 2))
    packing_table.add_column("Label", style="dim")
    packing_table.add_column("Value", style="white")

    packing_table.add_row("Alignment", f"{packing.alignment} bytes")
    packing_table.add_row("Byte stride", f"{packing.byte_stride} bytes")
    packing_table.add_row("Total", f"{packing.total_byte_length} bytes")

    console.print(packing_table)


def main() -> None:
    """Main entry point."""
    cli(auto_envvar_prefix="GLTF_ACCESSORS")


if __name__ == "__main__":
    main()
