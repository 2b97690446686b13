"""
Definicion de paletas de colores y gestion de temas.

El tema de la CLI sigue la preferencia claro/oscuro del sitio.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from portfolio_forms.core.preferences import ThemeMode


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Color principal (títulos, destacados)
    secondary: str    # Color secundario (subtítulos)
    accent: str       # Color de acento (valores ingresados)

    # Colores semánticos
    success: str      # Éxito, enviado
    warning: str      # Advertencia, pendiente
    error: str        # Error
    info: str         # Información
    muted: str        # Texto secundario/atenuado

    # Bordes
    border: str       # Color de bordes


# Tema claro - Primarios Bauhaus sobre fondo claro
THEME_LIGHT = ColorPalette(
    primary="#004f9f",      # Azul
    secondary="#5f5f5f",    # Gris medio
    accent="#af5f00",       # Ocre
    success="#008700",      # Verde
    warning="#af8700",      # Amarillo oscuro
    error="#d70000",        # Rojo
    info="#004f9f",         # Azul info
    muted="#808080",        # Gris
    border="#a8a8a8",       # Gris claro para bordes
)

# Tema oscuro - Colores pasteles sobre fondo oscuro
THEME_DARK = ColorPalette(
    primary="#5f87af",      # Azul suave
    secondary="#87afaf",    # Cyan apagado
    accent="#af87af",       # Púrpura suave
    success="#87af87",      # Verde suave
    warning="#d7af5f",      # Amarillo/naranja suave
    error="#d75f5f",        # Rojo suave
    info="#5f87af",         # Azul info
    muted="#808080",        # Gris
    border="#5f5f5f",       # Gris oscuro para bordes
)

THEMES = {
    ThemeMode.LIGHT: THEME_LIGHT,
    ThemeMode.DARK: THEME_DARK,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_LIGHT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeMode) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_LIGHT)
        cls._console = None  # Resetear console para recrear con nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "info": p.info,
                "muted": p.muted,
                "title": f"bold {p.primary}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
