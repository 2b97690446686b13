"""
Preferencias persistidas y controladores de tema y menú.

El único estado compartido es el `PreferenceStore` (clave-valor en JSON);
cada controlador guarda su propio estado explícito.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

THEME_KEY = "theme"
MOBILE_BREAKPOINT_PX = 768


class ThemeMode(str, Enum):
    """Temas del sitio."""
    LIGHT = "light"
    DARK = "dark"


THEME_ICONS = {
    ThemeMode.LIGHT: "☀",
    ThemeMode.DARK: "🌙",
}


class PreferenceStore:
    """Almacén clave-valor persistido en un archivo JSON."""

    def __init__(self, path: Optional[Path] = None):
        """
        Args:
            path: Archivo JSON. None mantiene las preferencias solo en memoria.
        """
        self.path = Path(path) if path is not None else None
        self._data: dict[str, str] = {}
        if self.path is not None and self.path.exists():
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"Preferencias inválidas en {self.path}: se espera un objeto JSON")
            self._data = data

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._data.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2)


class ThemeController:
    """Tema claro/oscuro con preferencia persistida."""

    def __init__(self, store: PreferenceStore):
        self.store = store
        stored = store.get(THEME_KEY, ThemeMode.LIGHT.value)
        try:
            self.theme = ThemeMode(stored)
        except ValueError:
            logger.warning("Tema guardado desconocido: %s", stored)
            self.theme = ThemeMode.LIGHT

    @property
    def icon(self) -> str:
        return THEME_ICONS[self.theme]

    def set_theme(self, theme: ThemeMode) -> str:
        """Aplica y persiste el tema. Retorna el anuncio para lectores de pantalla."""
        self.theme = theme
        self.store.set(THEME_KEY, theme.value)
        return f"Theme changed to {theme.value} mode"

    def toggle(self) -> str:
        new_theme = ThemeMode.DARK if self.theme == ThemeMode.LIGHT else ThemeMode.LIGHT
        return self.set_theme(new_theme)


class MenuController:
    """Menú móvil desplegable."""

    def __init__(self, breakpoint_px: int = MOBILE_BREAKPOINT_PX):
        self.breakpoint_px = breakpoint_px
        self.expanded = False

    @property
    def scroll_locked(self) -> bool:
        """El scroll de la página se bloquea mientras el menú está abierto."""
        return self.expanded

    def toggle(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded

    def close(self) -> None:
        self.expanded = False

    def handle_outside_click(self) -> None:
        self.close()

    def handle_escape(self) -> bool:
        """Cierra con Escape. Retorna True si estaba abierto (el foco vuelve al botón)."""
        was_open = self.expanded
        self.close()
        return was_open

    def handle_resize(self, width: int) -> None:
        if width > self.breakpoint_px:
            self.close()
