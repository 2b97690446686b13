"""
Llenado interactivo de un formulario.

Pregunta cada campo con questionary, lo valida al salir (blur) y al
final ejecuta el envío completo.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import questionary
import typer
from questionary import Style

from portfolio_forms.cli.common import build_transport, load_page, select_session
from portfolio_forms.cli.theme import (
    get_console,
    get_palette,
    print_error,
    print_header,
    print_info,
)
from portfolio_forms.cli.view import build_banner, build_form_table
from portfolio_forms.markup import Page
from portfolio_forms.models import FieldType, FormField, FormSession, SubmitOutcome


def get_fill_style() -> Style:
    """Estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.accent} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.success} bold'),
        ('instruction', f'fg:{p.muted} italic'),
    ])


def _prompt_text(fld: FormField) -> str:
    text = fld.display_label
    if fld.required:
        text += " *"
    if fld.max_length is not None:
        text += f" (máx. {fld.max_length})"
    return text


def _ask(fld: FormField, style: Style) -> Optional[str]:
    if fld.field_type == FieldType.CHECKBOX:
        answer = questionary.confirm(_prompt_text(fld), default=fld.checked, style=style).ask()
        return None if answer is None else ("on" if answer else "")
    if fld.field_type == FieldType.RADIO:
        return questionary.select(
            _prompt_text(fld),
            choices=fld.options,
            default=fld.value or None,
            style=style,
        ).ask()
    return questionary.text(
        _prompt_text(fld),
        default=fld.value,
        multiline=fld.field_type == FieldType.TEXTAREA,
        style=style,
    ).ask()


def ask_field(page: Page, session: FormSession, fld: FormField) -> bool:
    """
    Pregunta un campo hasta que sea válido.

    Returns:
        False si el usuario canceló
    """
    style = get_fill_style()
    while True:
        answer = _ask(fld, style)
        if answer is None:
            return False

        page.input(session.form_id, fld.name, answer)
        counter = page.counters.get((session.form_id, fld.name))
        if counter is not None:
            print_info(f"{counter.text} caracteres")

        if page.blur(session.form_id, fld.name) is not False:
            return True
        print_error(fld.error.message if fld.error else "Valor inválido")


def fill_form(
    page_path: Annotated[Path, typer.Argument(help="Página HTML renderizada")],
    form_id: Annotated[Optional[str], typer.Option("--form", "-f", help="ID del formulario")] = None,
    endpoint: Annotated[
        Optional[str], typer.Option("--endpoint", "-e", help="URL del backend de formularios")
    ] = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="No envía; solo muestra el payload")] = False,
) -> None:
    """Completa un formulario de forma interactiva y lo envía."""
    transport = build_transport(endpoint, dry_run)
    page = load_page(page_path, transport)
    session = select_session(page, form_id)
    if session.form_id not in page.controllers:
        print_error(f"El formulario '{session.form_id}' no usa data-validate.")
        raise typer.Exit(1)

    print_header(f"Formulario: {session.form_id}", "Campos con * son requeridos")

    for fld in session.validated_fields():
        if fld.field_type in (FieldType.FILE, FieldType.HIDDEN):
            continue
        if not ask_field(page, session, fld):
            print_info("Cancelado.")
            raise typer.Exit(1)

    console = get_console()
    console.print(build_form_table(session))

    if not questionary.confirm(f"¿{session.submit_label}?", default=True, style=get_fill_style()).ask():
        print_info("No se envió el formulario.")
        return

    outcome = asyncio.run(page.submit(session.form_id))
    banner = build_banner(session)
    if banner is not None and outcome != SubmitOutcome.DISCARDED:
        console.print(banner)
    if outcome not in (SubmitOutcome.SENT, SubmitOutcome.DISCARDED):
        raise typer.Exit(1)
