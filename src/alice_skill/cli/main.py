"""
Alice skill CLI — `alice-skill` command.

Commands:
  alice-skill serve             Run the webhook with uvicorn
  alice-skill send <message>    Post a test utterance to a running skill
  alice-skill entities <file>   Decode a request file and list its named entities
"""

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install alice-skill[cli]")

console = Console()


@click.group()
@click.version_option("0.1.0")
def main():
    """Alice skill CLI — serve and poke Yandex Alice webhooks."""


# Register subcommands from separate modules
from alice_skill.cli.serve import serve_cmd
from alice_skill.cli.send import send_cmd
from alice_skill.cli.entities import entities_cmd

main.add_command(serve_cmd)
main.add_command(send_cmd)
main.add_command(entities_cmd)


if __name__ == "__main__":
    main()
