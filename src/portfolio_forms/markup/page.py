"""
Vinculación de una página: controladores y widgets por formulario.

Se construye una vez al inicializar la página y despacha los eventos de
usuario (blur, input, submit, change) al controlador o widget que
corresponde.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from portfolio_forms.config import Settings
from portfolio_forms.core import (
    FormController,
    CharacterCounter,
    FileSelector,
    Transport,
)
from portfolio_forms.models import (
    EventKind,
    FieldEvent,
    FormField,
    FormSession,
    SelectedFile,
    SubmitOutcome,
)

from .parser import ParsedForm, parse_html


logger = logging.getLogger(__name__)


class Page:
    """Formularios de una página con sus controladores y widgets."""

    def __init__(
        self,
        forms: list[ParsedForm],
        transport: Transport,
        settings: Optional[Settings] = None,
        html: str = "",
    ):
        self.settings = settings or Settings()
        self.html = html
        self.sessions: dict[str, FormSession] = {}
        self.controllers: dict[str, FormController] = {}
        self.counters: dict[tuple[str, str], CharacterCounter] = {}
        self.file_selectors: dict[tuple[str, str], FileSelector] = {}

        messages = self.settings.messages
        for parsed in forms:
            session = FormSession.from_fields(
                parsed.form_id, parsed.fields, submit_label=parsed.submit_label
            )
            self.sessions[parsed.form_id] = session
            if parsed.validate:
                self.controllers[parsed.form_id] = FormController(session, transport, messages)

            for name in parsed.counter_fields:
                self.counters[(parsed.form_id, name)] = CharacterCounter(
                    session.fields[name], default_max=self.settings.counter_default_max
                )
            for name in parsed.file_fields:
                self.file_selectors[(parsed.form_id, name)] = FileSelector(
                    session.fields[name],
                    max_size=self.settings.max_file_size,
                    messages=messages,
                )

        logger.debug(
            "Forms Initialized: %d formularios, %d validados",
            len(self.sessions), len(self.controllers),
        )

    @classmethod
    def from_html(
        cls,
        html: str,
        transport: Transport,
        settings: Optional[Settings] = None,
    ) -> "Page":
        settings = settings or Settings()
        return cls(parse_html(html, settings.honeypot_name), transport, settings, html=html)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        transport: Transport,
        settings: Optional[Settings] = None,
    ) -> "Page":
        html = Path(path).read_text(encoding="utf-8")
        return cls.from_html(html, transport, settings)

    # ------------------------------------------------------------------
    # Consultas
    # ------------------------------------------------------------------

    def get_session(self, form_id: Optional[str] = None) -> FormSession:
        """
        Obtiene la sesión de un formulario.

        Sin `form_id` retorna el primer formulario validado (o el primero).
        """
        if form_id is None:
            if self.controllers:
                return next(iter(self.controllers.values())).session
            if self.sessions:
                return next(iter(self.sessions.values()))
            raise ValueError("La página no tiene formularios")
        if form_id not in self.sessions:
            raise KeyError(f"Formulario no encontrado: {form_id}")
        return self.sessions[form_id]

    def get_controller(self, form_id: Optional[str] = None) -> FormController:
        session = self.get_session(form_id)
        controller = self.controllers.get(session.form_id)
        if controller is None:
            raise ValueError(f"El formulario '{session.form_id}' no usa data-validate")
        return controller

    def _field(self, form_id: str, name: str) -> FormField:
        fld = self.get_session(form_id).get_field(name)
        if fld is None:
            raise KeyError(f"Campo no encontrado: {name}")
        return fld

    # ------------------------------------------------------------------
    # Eventos
    # ------------------------------------------------------------------

    def input(self, form_id: str, name: str, value: str) -> None:
        """Edición de un campo: actualiza valor, limpia su error y el contador."""
        controller = self.controllers.get(form_id)
        if controller is not None:
            controller.handle_input(name, value)
        else:
            self._field(form_id, name).set_value(value)
        counter = self.counters.get((form_id, name))
        if counter is not None:
            counter.update()

    def blur(self, form_id: str, name: str) -> Optional[bool]:
        """Salida de un campo: lo valida si el formulario usa data-validate."""
        controller = self.controllers.get(form_id)
        if controller is None:
            return None
        return controller.handle_blur(name)

    def change(self, form_id: str, name: str, files: list[SelectedFile]) -> Optional[bool]:
        """Selección de archivos en un campo file."""
        selector = self.file_selectors.get((form_id, name))
        if selector is None:
            return None
        return selector.select(files)

    async def submit(self, form_id: str) -> Optional[SubmitOutcome]:
        """Envía el formulario y recalcula sus contadores (el envío exitoso vacía los campos)."""
        controller = self.controllers.get(form_id)
        if controller is None:
            return None
        outcome = await controller.handle_submit()
        for (counter_form, _), counter in self.counters.items():
            if counter_form == form_id:
                counter.update()
        return outcome

    async def dispatch(self, event: FieldEvent) -> Union[bool, SubmitOutcome, None]:
        """Envía un evento al controlador o widget correspondiente."""
        if event.kind == EventKind.SUBMIT:
            return await self.submit(event.form_id)

        name = event.field_name or ""
        if event.kind == EventKind.INPUT:
            self.input(event.form_id, name, event.value or "")
            return None
        if event.kind == EventKind.BLUR:
            return self.blur(event.form_id, name)
        if event.kind == EventKind.CHANGE:
            return self.change(event.form_id, name, event.files)
        return None
