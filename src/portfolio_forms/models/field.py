"""
Modelos de campos de formulario.

Cada campo declara sus restricciones con los mismos atributos que el
HTML renderizado (required, type, minlength, maxlength, pattern, title).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class FieldType(Enum):
    """Tipos de campo reconocidos."""
    TEXT = "text"
    EMAIL = "email"
    URL = "url"
    TEL = "tel"
    PASSWORD = "password"
    SEARCH = "search"
    NUMBER = "number"
    HIDDEN = "hidden"
    TEXTAREA = "textarea"
    SELECT = "select"
    FILE = "file"
    CHECKBOX = "checkbox"
    RADIO = "radio"

    @classmethod
    def from_attr(cls, value: Optional[str]) -> "FieldType":
        """Convierte el atributo `type` del HTML; desconocidos se tratan como texto."""
        if not value:
            return cls.TEXT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.TEXT


# Entradas que desmarcan un checkbox
UNCHECKED_VALUES = {"", "0", "false", "off", "no"}


class FieldValidity(Enum):
    """Estado de validez de un campo."""
    UNCHECKED = "unchecked"
    VALID = "valid"
    INVALID = "invalid"


@dataclass
class ErrorAnnotation:
    """Mensaje de error visible junto a un campo."""
    message: str
    role: str = "alert"


@dataclass
class FormField:
    """Definición y estado actual de un campo del formulario."""
    name: str
    field_type: FieldType = FieldType.TEXT
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    title: Optional[str] = None  # Mensaje personalizado para `pattern`
    label: str = ""
    honeypot: bool = False
    # Estado actual
    value: str = ""
    validity: FieldValidity = FieldValidity.UNCHECKED
    error: Optional[ErrorAnnotation] = None
    disabled: bool = False
    # checkbox: `value` es el valor declarado y `checked` indica si se envía
    checked: bool = False
    # radio: valores de las opciones del grupo; `value` es la elegida
    options: list[str] = field(default_factory=list)

    @property
    def display_label(self) -> str:
        """Etiqueta para mostrar (cae al nombre si no hay label)."""
        return self.label or self.name

    @property
    def is_file(self) -> bool:
        return self.field_type == FieldType.FILE

    @property
    def is_choice(self) -> bool:
        return self.field_type in (FieldType.CHECKBOX, FieldType.RADIO)

    @property
    def effective_value(self) -> str:
        """Valor que se valida y se envía (vacío si la casilla no está marcada)."""
        if self.field_type == FieldType.CHECKBOX and not self.checked:
            return ""
        return self.value

    def set_value(self, value: str) -> None:
        """
        Aplica un valor ingresado por el usuario.

        En un checkbox marca o desmarca la casilla; en un grupo radio
        elige la opción con ese valor.

        Raises:
            ValueError: Si la opción no existe en el grupo radio
        """
        if self.field_type == FieldType.CHECKBOX:
            self.checked = value.strip().lower() not in UNCHECKED_VALUES
        elif self.field_type == FieldType.RADIO:
            if value and value not in self.options:
                raise ValueError(
                    f"Opción inválida para {self.name}: {value} (opciones: {', '.join(self.options)})"
                )
            self.value = value
        else:
            self.value = value

    def mark_valid(self) -> None:
        """Marca el campo como válido y elimina su anotación."""
        self.validity = FieldValidity.VALID
        self.error = None

    def mark_invalid(self, message: str) -> None:
        """Marca el campo como inválido; reemplaza cualquier anotación previa."""
        self.validity = FieldValidity.INVALID
        self.error = ErrorAnnotation(message=message)

    def clear_error(self) -> None:
        """Quita la anotación de error (el usuario está editando)."""
        self.error = None
        self.validity = FieldValidity.UNCHECKED

    def reset(self) -> None:
        """Vacía el valor y limpia el estado de validez."""
        if self.field_type == FieldType.CHECKBOX:
            self.checked = False
        else:
            self.value = ""
        self.error = None
        self.validity = FieldValidity.UNCHECKED

    def constraints(self) -> dict:
        """Retorna las restricciones declaradas (solo las presentes)."""
        declared = {}
        if self.required:
            declared["required"] = True
        if self.field_type in (FieldType.EMAIL, FieldType.URL):
            declared["type"] = self.field_type.value
        if self.min_length is not None:
            declared["minlength"] = self.min_length
        if self.max_length is not None:
            declared["maxlength"] = self.max_length
        if self.pattern is not None:
            declared["pattern"] = self.pattern
        return declared


@dataclass
class SelectedFile:
    """Archivo elegido en un campo de tipo file."""
    name: str
    size: int = 0  # bytes


@dataclass
class FieldEvent:
    """Evento de usuario sobre un formulario (blur, input, submit, change)."""
    kind: "EventKind"
    form_id: str
    field_name: Optional[str] = None
    value: Optional[str] = None
    files: list[SelectedFile] = field(default_factory=list)


class EventKind(Enum):
    """Eventos de la superficie DOM que consume el controlador."""
    BLUR = "blur"
    INPUT = "input"
    SUBMIT = "submit"
    CHANGE = "change"
