"""
Comando de preferencias: tema claro/oscuro persistido.
"""

from enum import Enum
from typing import Annotated

import typer

from portfolio_forms.cli.common import get_settings
from portfolio_forms.cli.theme import CLITheme, print_error, print_info, print_success
from portfolio_forms.core import PreferenceStore, ThemeController


class ThemeAction(str, Enum):
    SHOW = "show"
    TOGGLE = "toggle"


def get_theme_controller() -> ThemeController:
    """Controlador de tema sobre el archivo de preferencias configurado."""
    return ThemeController(PreferenceStore(get_settings().preferences_path))


def theme_command(
    action: Annotated[ThemeAction, typer.Argument(help="show | toggle")] = ThemeAction.SHOW,
) -> None:
    """Muestra o alterna el tema (claro/oscuro) guardado en las preferencias."""
    try:
        controller = get_theme_controller()
    except ValueError as e:
        print_error(f"Preferencias ilegibles: {e}")
        raise typer.Exit(1)
    if action == ThemeAction.TOGGLE:
        announcement = controller.toggle()
        CLITheme.set_theme(controller.theme)
        print_success(announcement)
        return
    print_info(f"Tema actual: {controller.theme.value} {controller.icon}")
