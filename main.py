import logging
import sys

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from adventure.config import build_session, load_config, setup_logging
from adventure.errors import AdventureError
from adventure.game import Game
from adventure.gameio import custom_theme

console = Console(theme=custom_theme, highlight=False)


def show_welcome_screen(config):
    welcome_md = Markdown(
        "# WILDGRID\n\n"
        "A world that grows wherever you walk.\n\n"
        "> *Type 'help' for commands, 'quit' to leave.*"
    )

    console.print(Panel(
        welcome_md,
        border_style="info",
        padding=(1, 2),
        width=60
    ))

    if config.get('debug_mode', False):
        console.print(f"[dim]Debug mode on. Seed: {config.get('seed')}. Log: {config.get('log_file')}[/dim]\n")


def main():
    try:
        config = load_config()
    except AdventureError as e:
        console.print(Panel(f"[warning]CONFIG ERROR:[/]\n{e}", border_style="warning"))
        return 1

    setup_logging(config)
    show_welcome_screen(config)

    try:
        session = build_session(config, console=console)
        game = Game(session, prompt=config.get('prompt', "? "))
        game.run()
    except AdventureError as e:
        logging.exception("Game aborted")
        console.print(Panel(f"[warning]FATAL ERROR:[/]\n{e}", border_style="warning"))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
