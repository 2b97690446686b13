"""
Controlador de interacción de formularios.

Un controlador por formulario: valida campos, bloquea el envío si hay
errores, maneja la máquina de estados de envío y reporta el resultado
en el banner de estado sin recargar la página.

    idle → validating → (idle | submitting) → (success | error) → idle
"""

import logging
from typing import Callable, Optional

from portfolio_forms.config import FormMessages
from portfolio_forms.models import (
    FormField,
    FormSession,
    SubmissionState,
    SubmitOutcome,
    StatusBanner,
    STATE_BANNER_KIND,
)

from .transport import Transport, TransportError
from .validation import check_field, validate_field


logger = logging.getLogger(__name__)

StateListener = Callable[[SubmissionState, SubmissionState], None]


class FormController:
    """Controla un único formulario (sesión) y su ciclo de envío."""

    def __init__(
        self,
        session: FormSession,
        transport: Transport,
        messages: Optional[FormMessages] = None,
    ):
        self.session = session
        self.transport = transport
        self.messages = messages or FormMessages()
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Estado
    # ------------------------------------------------------------------

    @property
    def state(self) -> SubmissionState:
        return self.session.state

    @property
    def is_valid(self) -> bool:
        """Validez del formulario, recalculada en cada consulta (sin efectos)."""
        return all(check_field(f, self.messages)[0] for f in self.session.validated_fields())

    def subscribe(self, listener: StateListener) -> None:
        """Registra un observador de transiciones (estado_anterior, estado_nuevo)."""
        self._listeners.append(listener)

    def _transition(self, new_state: SubmissionState, message: Optional[str] = None) -> None:
        old_state = self.session.state
        self.session.state = new_state
        kind = STATE_BANNER_KIND.get(new_state)
        if kind is not None and message is not None:
            self.session.banner = StatusBanner(kind=kind, message=message)
        logger.debug("[%s] %s -> %s", self.session.form_id, old_state.value, new_state.value)
        for listener in self._listeners:
            listener(old_state, new_state)

    # ------------------------------------------------------------------
    # Validación
    # ------------------------------------------------------------------

    def _resolve(self, field) -> FormField:
        if isinstance(field, FormField):
            return field
        fld = self.session.get_field(field)
        if fld is None:
            raise KeyError(f"Campo no encontrado: {field}")
        return fld

    def validate_field(self, field) -> bool:
        """Valida un campo (por nombre o instancia) sin tocar los demás."""
        return validate_field(self._resolve(field), self.messages)

    def validate_all(self) -> bool:
        """Valida todos los campos excepto el honeypot."""
        valid = True
        for fld in self.session.validated_fields():
            if not validate_field(fld, self.messages):
                valid = False
        return valid

    def honeypot_tripped(self) -> bool:
        """True si algún campo trampa tiene contenido."""
        return any(f.effective_value for f in self.session.honeypot_fields())

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------

    def handle_blur(self, name: str) -> bool:
        """El usuario salió del campo: validarlo."""
        fld = self._resolve(name)
        if fld.honeypot:
            return True
        return self.validate_field(fld)

    def handle_input(self, name: str, value: str) -> None:
        """El usuario editó el campo: guardar valor y quitar su error."""
        fld = self._resolve(name)
        fld.set_value(value)
        fld.clear_error()

    async def handle_submit(self) -> SubmitOutcome:
        """
        Ejecuta el contrato completo de envío.

        Returns:
            SubmitOutcome con el resultado del intento
        """
        if self.session.state != SubmissionState.IDLE or self.session.submit_disabled:
            logger.debug("[%s] Envío ignorado: ya hay uno en curso", self.session.form_id)
            return SubmitOutcome.BUSY

        if self.honeypot_tripped():
            logger.debug("[%s] Spam detected", self.session.form_id)
            return SubmitOutcome.DISCARDED

        self._transition(SubmissionState.VALIDATING)
        if not self.validate_all():
            self.session.banner = StatusBanner(
                kind=STATE_BANNER_KIND[SubmissionState.ERROR],
                message=self.messages.fix_errors,
            )
            self._transition(SubmissionState.IDLE)
            return SubmitOutcome.BLOCKED

        payload = self.session.payload()

        self._transition(SubmissionState.SUBMITTING, self.messages.sending)
        self._disable_form()

        try:
            await self.transport.submit(payload)
        except TransportError as e:
            logger.warning("[%s] Form submission error: %s", self.session.form_id, e)
            self._transition(SubmissionState.ERROR, self.messages.failure)
            outcome = SubmitOutcome.FAILED
        else:
            self._transition(SubmissionState.SUCCESS, self.messages.success)
            for fld in self.session.fields.values():
                fld.reset()
            outcome = SubmitOutcome.SENT
        finally:
            self._enable_form()
            self._transition(SubmissionState.IDLE)

        return outcome

    # ------------------------------------------------------------------
    # Habilitar / deshabilitar
    # ------------------------------------------------------------------

    def _disable_form(self) -> None:
        s = self.session
        s.set_disabled(True)
        s.submit_label_original = s.submit_label
        s.submit_label = self.messages.sending_label

    def _enable_form(self) -> None:
        s = self.session
        s.set_disabled(False)
        if s.submit_label_original is not None:
            s.submit_label = s.submit_label_original
            s.submit_label_original = None
