"""
Estado de una sesión de formulario y banner de estado.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from .field import FormField, FieldType


class SubmissionState(Enum):
    """Estados del ciclo de envío."""
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class BannerKind(Enum):
    """Tipo de banner de estado (se usa como clase CSS)."""
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class SubmitOutcome(Enum):
    """Resultado de un intento de envío."""
    SENT = "sent"            # Transporte confirmó el envío
    FAILED = "failed"        # Transporte rechazó el envío
    BLOCKED = "blocked"      # Validación falló, no se contactó al transporte
    DISCARDED = "discarded"  # Honeypot con contenido, descartado en silencio
    BUSY = "busy"            # Ya hay un envío en curso


@dataclass
class StatusBanner:
    """Banner de estado del formulario (uno por formulario)."""
    kind: BannerKind
    message: str

    @property
    def css_class(self) -> str:
        return f"form-status {self.kind.value}"


# Banner que corresponde a cada estado no-idle
STATE_BANNER_KIND = {
    SubmissionState.SUBMITTING: BannerKind.LOADING,
    SubmissionState.SUCCESS: BannerKind.SUCCESS,
    SubmissionState.ERROR: BannerKind.ERROR,
}


@dataclass
class FormSession:
    """
    Sesión de un formulario: campos en orden de documento y estado de envío.

    La validez no se guarda aquí; se recalcula a pedido desde el
    controlador para que nunca quede desactualizada.
    """
    form_id: str
    fields: dict[str, FormField] = field(default_factory=dict)
    state: SubmissionState = SubmissionState.IDLE
    banner: Optional[StatusBanner] = None
    submit_label: str = "Send"
    submit_label_original: Optional[str] = None
    submit_disabled: bool = False

    @classmethod
    def from_fields(cls, form_id: str, fields: list[FormField], **kwargs) -> "FormSession":
        """Crea una sesión a partir de una lista de campos (orden de documento)."""
        return cls(form_id=form_id, fields={f.name: f for f in fields}, **kwargs)

    def get_field(self, name: str) -> Optional[FormField]:
        """Obtiene un campo por nombre."""
        return self.fields.get(name)

    def validated_fields(self) -> Iterator[FormField]:
        """Campos sujetos a validación (todos excepto el honeypot)."""
        return (f for f in self.fields.values() if not f.honeypot)

    def honeypot_fields(self) -> list[FormField]:
        return [f for f in self.fields.values() if f.honeypot]

    def payload(self) -> dict[str, str]:
        """
        Pares nombre→valor para el transporte.

        Quedan fuera el honeypot, los archivos, los checkbox sin marcar y
        los grupos radio sin opción elegida.
        """
        return {
            f.name: f.effective_value
            for f in self.fields.values()
            if not f.honeypot
            and f.field_type != FieldType.FILE
            and not (f.is_choice and not f.effective_value)
        }

    def set_disabled(self, disabled: bool) -> None:
        """Habilita o deshabilita todos los campos y el control de envío."""
        for f in self.fields.values():
            f.disabled = disabled
        self.submit_disabled = disabled

    def error_count(self) -> int:
        return sum(1 for f in self.fields.values() if f.error is not None)
