"""
Widgets auxiliares: contador de caracteres y visor de archivos seleccionados.

Comparten la idea de campo del controlador pero no dependen de él;
cada uno se vincula a un único campo.
"""

import logging
from typing import Callable, Optional

from portfolio_forms.config import FormMessages, MEGABYTE
from portfolio_forms.models import FormField, SelectedFile


logger = logging.getLogger(__name__)

DEFAULT_COUNTER_MAX = 500
DEFAULT_MAX_FILE_SIZE = 5 * MEGABYTE


class CharacterCounter:
    """Contador informativo de caracteres para un campo multilínea."""

    def __init__(
        self,
        field: FormField,
        max_length: Optional[int] = None,
        default_max: int = DEFAULT_COUNTER_MAX,
    ):
        self.field = field
        self.max_length = max_length or field.max_length or default_max
        self.length = 0
        self.limit_reached = False
        self.update()

    @property
    def remaining(self) -> int:
        return self.max_length - self.length

    @property
    def text(self) -> str:
        return f"{self.length} / {self.max_length}"

    def update(self) -> str:
        """Recalcula el conteo con el valor actual del campo."""
        self.length = len(self.field.value)
        self.limit_reached = self.remaining <= 0
        return self.text


def _log_error(message: str) -> None:
    logger.error(message)


class FileSelector:
    """
    Muestra los archivos elegidos en un campo file.

    Si algún archivo supera el límite de tamaño se descarta toda la
    selección y se reporta un único error.
    """

    def __init__(
        self,
        field: FormField,
        max_size: int = DEFAULT_MAX_FILE_SIZE,
        on_error: Optional[Callable[[str], None]] = None,
        messages: Optional[FormMessages] = None,
    ):
        self.field = field
        self.max_size = max_size
        self.on_error = on_error or _log_error
        self.messages = messages or FormMessages()
        self.files: list[SelectedFile] = []
        self.display = ""
        self.error: Optional[str] = None

    @property
    def size_label(self) -> str:
        if self.max_size % MEGABYTE == 0:
            return f"{self.max_size // MEGABYTE}MB"
        return f"{self.max_size} bytes"

    def select(self, files: list[SelectedFile]) -> bool:
        """
        Procesa una nueva selección.

        Returns:
            True si la selección se aceptó (o quedó vacía), False si se rechazó
        """
        self.error = None
        if not files:
            self.clear()
            return True

        oversized = [f for f in files if f.size > self.max_size]
        if oversized:
            self.clear()
            self.error = self.messages.file_too_large.format(limit=self.size_label)
            self.on_error(self.error)
            return False

        self.files = list(files)
        self.display = ", ".join(f.name for f in files)
        self.field.value = files[0].name
        return True

    def clear(self) -> None:
        """Vacía la selección y el texto mostrado."""
        self.files = []
        self.display = ""
        self.field.value = ""
