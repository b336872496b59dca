"""Theme for consistent Rich styling of pixbuild console output."""

from rich.console import Console
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"
    HEADER = "bold cyan"


class Icons:
    """Plain-text message prefixes, one per message type."""

    SUCCESS = "[SUCCESS]"
    ERROR = "[ERROR]"
    WARNING = "[WARNING]"
    INFO = "[INFO]"
    BULLET = "-"

    @classmethod
    def format_with_icon(cls, icon_name: str, text: str) -> str:
        return f"{getattr(cls, icon_name)} {text}"


PIXBUILD_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "header": Colors.HEADER,
    }
)


class ThemedConsole:
    """Console wrapper with the pixbuild theme applied.

    Messages are printed with markup disabled so text such as
    ``http://[DEVICE_IP]/`` is shown verbatim.
    """

    def __init__(self) -> None:
        self.console = Console(theme=PIXBUILD_THEME, highlight=False)

    def _print(self, icon_name: str, message: str, style: str) -> None:
        self.console.print(
            Icons.format_with_icon(icon_name, message), style=style, markup=False
        )

    def print_success(self, message: str) -> None:
        self._print("SUCCESS", message, "success")

    def print_error(self, message: str) -> None:
        self._print("ERROR", message, "error")

    def print_warning(self, message: str) -> None:
        self._print("WARNING", message, "warning")

    def print_info(self, message: str) -> None:
        self._print("INFO", message, "info")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        self.console.print(f"{' ' * (indent * 2)}{Icons.BULLET} {message}", markup=False)

    def print_plain(self, message: str = "", style: str | None = None) -> None:
        self.console.print(message, style=style, markup=False)


def get_themed_console() -> ThemedConsole:
    """Get a console using the pixbuild theme, bound to the current stdout."""
    return ThemedConsole()
