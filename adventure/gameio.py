from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",
    "dim": "dim",
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
    "prompt": "yellow",
    "exit": "cyan",
})


class GameIO:
    """
    All console traffic of a session goes through here.
    Lines written during the current turn are also kept so handlers can
    return what they printed.
    """

    def __init__(self, console=None):
        if console is None:
            console = Console(theme=custom_theme, highlight=False)
        else:
            # Handlers print with the theme's style names.
            console.push_theme(custom_theme)
        self.console = console
        self.current_turn_output = []

    def write(self, message, style=None):
        # Game text is printed as-is; player words never turn into markup.
        self.console.print(str(message), style=style, markup=False)
        self.current_turn_output.append(str(message))

    def begin_turn(self):
        self.current_turn_output = []

    def turn_output(self):
        return list(self.current_turn_output)

    def read_line(self, prompt="? "):
        """Blocks on the console until the player enters a line."""
        return self.console.input(f"[prompt]{prompt}[/prompt]")

    def error(self, message, title="Error"):
        self.console.print(Panel(str(message), title=title, border_style="warning"))
