"""CLI: alice-skill send"""

import asyncio
import json
from typing import Optional

import click
import httpx
from rich.console import Console

from alice_skill.config import get_settings
from alice_skill.errors import AliceSkillError
from alice_skill.transport.envelope import build_request
from alice_skill.transport.http import SkillClient

console = Console()


@click.command("send")
@click.argument("message")
@click.option("--url", default=None, help="Skill webhook URL (defaults to the configured one)")
@click.option("-s", "--session", "session_id", default=None)
@click.option("--new", "new_session", is_flag=True, help="Mark as the first message of a session")
@click.option("--button", is_flag=True, help="Send as ButtonPressed")
@click.option("--dangerous", is_flag=True, help="Flag the utterance as dangerous context")
@click.option("--json-output", "--json", is_flag=True)
def send_cmd(
    message: str,
    url: Optional[str],
    session_id: Optional[str],
    new_session: bool,
    button: bool,
    dangerous: bool,
    json_output: bool,
):
    """Send a one-shot utterance to a skill."""

    async def _send():
        client = SkillClient(url or get_settings().url)
        request = build_request(message, session_id=session_id, new=new_session, button=button, dangerous=dangerous)
        try:
            output = await client.send(request)
        finally:
            await client.close()

        if json_output:
            click.echo(json.dumps(output.model_dump(mode="json"), ensure_ascii=False, indent=2))
            return
        console.print(f"[green]Alice:[/green] {output.response.text}")
        if output.response.tts != output.response.text:
            console.print(f"[dim]tts: {output.response.tts}[/dim]")
        for b in output.response.buttons:
            link = f" → {b.url}" if b.url else ""
            console.print(f"  [cyan][{b.title}][/cyan]{link}")
        if output.response.end_session:
            console.print("[dim](session ended)[/dim]")

    try:
        asyncio.run(_send())
    except (AliceSkillError, httpx.HTTPError) as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
