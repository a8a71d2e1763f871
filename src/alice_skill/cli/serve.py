"""CLI: alice-skill serve"""

from typing import Optional

import click
from rich.console import Console

from alice_skill.config import get_settings, load_handler
from alice_skill.errors import AliceSkillError
from alice_skill.logging_config import setup_logging
from alice_skill.skill import Skill

console = Console()


@click.command("serve")
@click.option("--host", default=None, help="Bind address")
@click.option("--port", default=None, type=int)
@click.option("--path", default=None, help="Webhook path")
@click.option("--handler", "handler_ref", default=None, help="Handler as module:function")
@click.option("--log-level", default=None)
@click.option("--no-auto-pings", is_flag=True, help="Pass ping requests to the handler")
@click.option("--no-auto-dangerous", is_flag=True, help="Pass flagged requests to the handler")
def serve_cmd(
    host: Optional[str],
    port: Optional[int],
    path: Optional[str],
    handler_ref: Optional[str],
    log_level: Optional[str],
    no_auto_pings: bool,
    no_auto_dangerous: bool,
):
    """Serve a skill handler over HTTP."""
    import uvicorn

    overrides = {
        "host": host,
        "port": port,
        "path": path,
        "handler": handler_ref,
        "log_level": log_level,
        "auto_pings": False if no_auto_pings else None,
        "auto_dangerous_context": False if no_auto_dangerous else None,
    }
    settings = get_settings().model_copy(update={k: v for k, v in overrides.items() if v is not None})

    setup_logging(settings.log_level)
    try:
        handler = load_handler(settings.handler)
    except AliceSkillError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    app = Skill.from_settings(settings).create_app(handler, path=settings.path)
    console.print(f"[green]Serving {settings.handler} at {settings.url}[/green]")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
