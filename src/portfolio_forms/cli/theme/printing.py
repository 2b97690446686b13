"""
Funciones que imprimen directamente a la consola.
"""

from rich.panel import Panel
from rich.text import Text
from rich import box

from portfolio_forms.cli.theme.palette import get_console, get_palette


def styled_success(text: str) -> Text:
    """Texto de éxito."""
    return Text(f"[+] {text}", style=get_palette().success)


def styled_warning(text: str) -> Text:
    """Texto de advertencia."""
    return Text(f"[!] {text}", style=get_palette().warning)


def styled_error(text: str) -> Text:
    """Texto de error."""
    return Text(f"[x] {text}", style=get_palette().error)


def styled_info(text: str) -> Text:
    """Texto informativo."""
    return Text(f"[i] {text}", style=get_palette().info)


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    p = get_palette()
    content = Text(text, style=f"bold {p.primary}")
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)
    get_console().print(Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2)))


def print_success(text: str) -> None:
    get_console().print(styled_success(text))


def print_warning(text: str) -> None:
    get_console().print(styled_warning(text))


def print_error(text: str) -> None:
    get_console().print(styled_error(text))


def print_info(text: str) -> None:
    get_console().print(styled_info(text))
