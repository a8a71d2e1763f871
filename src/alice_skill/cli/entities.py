"""CLI: alice-skill entities"""

import json
from pathlib import Path
from typing import Optional

import click
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from alice_skill.codec import decode_input
from alice_skill.errors import DecodeError, UnknownZoneError, ValueShapeError
from alice_skill.models.entities import RequestEntity

console = Console()


def _fields(value: BaseModel) -> str:
    return ", ".join(f"{k}={v}" for k, v in value.model_dump().items() if v)


def _describe(entity: RequestEntity, zone: str) -> str:
    if entity.is_geo():
        return _fields(entity.geo_value())
    if entity.is_fio():
        return _fields(entity.fio_value())
    if entity.is_float():
        return str(entity.float_value())
    if entity.is_int():
        return str(entity.int_value())
    value = entity.datetime_value()
    prefix = "relative → " if value.is_relative() else ""
    return prefix + value.time(zone).isoformat()


@click.command("entities")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--zone", default=None, help="Time zone for YANDEX.DATETIME (default: meta.timezone)")
@click.option("--json-output", "--json", is_flag=True)
def entities_cmd(path: Path, zone: Optional[str], json_output: bool):
    """List the named entities of a saved webhook request."""
    try:
        input_data = decode_input(path.read_bytes())
    except DecodeError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    nlu = input_data.request.nlu
    zone = zone or input_data.meta.timezone or "UTC"
    rows = []
    for entity in nlu.entities:
        try:
            words = " ".join(nlu.tokens_for(entity))
        except ValueShapeError:
            words = f"[{entity.tokens.start}:{entity.tokens.end}]"
        try:
            value = _describe(entity, zone)
        except (ValueShapeError, UnknownZoneError) as e:
            value = f"error: {e}"
        rows.append({"tokens": words, "type": entity.type.to_wire(), "value": value})

    if json_output:
        for row in rows:
            click.echo(json.dumps(row, ensure_ascii=False))
        return
    table = Table(title=f"Entities ({len(rows)})")
    table.add_column("Tokens", style="bold")
    table.add_column("Type")
    table.add_column("Value")
    for row in rows:
        table.add_row(row["tokens"], row["type"], row["value"])
    console.print(table)
