"""
Sistema de temas para la interfaz CLI de portfolio-forms.

- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- printing: Funciones de texto estilizado e impresion a consola
"""

from portfolio_forms.cli.theme.palette import (
    ColorPalette,
    THEME_LIGHT,
    THEME_DARK,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)
from portfolio_forms.cli.theme.printing import (
    styled_success,
    styled_warning,
    styled_error,
    styled_info,
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
)

__all__ = [
    "ColorPalette",
    "THEME_LIGHT",
    "THEME_DARK",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "styled_success",
    "styled_warning",
    "styled_error",
    "styled_info",
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
]
