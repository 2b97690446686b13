"""
Comandos de formularios: inspect, validate, submit.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer

from portfolio_forms.cli.common import (
    apply_values,
    build_transport,
    load_page,
    parse_assignments,
    select_session,
)
from portfolio_forms.cli.theme import (
    get_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from portfolio_forms.cli.view import build_banner, build_form_table, build_inspect_table
from portfolio_forms.markup import render_page
from portfolio_forms.models import SubmitOutcome


PageArg = Annotated[Path, typer.Argument(help="Página HTML renderizada")]
FormOpt = Annotated[Optional[str], typer.Option("--form", "-f", help="ID del formulario")]
SetOpt = Annotated[
    Optional[list[str]],
    typer.Option("--set", "-s", help="Valor de un campo (nombre=valor), repetible"),
]
DataOpt = Annotated[Optional[Path], typer.Option("--data", "-d", help="JSON con valores")]


def inspect(page_path: PageArg) -> None:
    """Lista los formularios de una página con sus campos y restricciones."""
    page = load_page(page_path)
    if not page.sessions:
        print_warning("La página no tiene formularios.")
        return
    get_console().print(build_inspect_table(page))


def validate(
    page_path: PageArg,
    form_id: FormOpt = None,
    assignments: SetOpt = None,
    data_file: DataOpt = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Escribe el HTML con los errores marcados"),
    ] = None,
) -> None:
    """Valida todos los campos de un formulario con los valores dados."""
    page = load_page(page_path)
    session = select_session(page, form_id)
    apply_values(page, session, parse_assignments(assignments, data_file))

    controller = page.controllers.get(session.form_id)
    if controller is None:
        print_warning(f"El formulario '{session.form_id}' no usa data-validate.")
        return

    valid = controller.validate_all()
    get_console().print(build_form_table(session))

    if output is not None:
        output.write_text(render_page(page), encoding="utf-8")
        print_info(f"HTML anotado: {output}")

    if not valid:
        print_error(f"{session.error_count()} campo(s) con errores")
        raise typer.Exit(1)
    print_success("Todos los campos son válidos")


def submit(
    page_path: PageArg,
    form_id: FormOpt = None,
    assignments: SetOpt = None,
    data_file: DataOpt = None,
    endpoint: Annotated[
        Optional[str], typer.Option("--endpoint", "-e", help="URL del backend de formularios")
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", help="No envía; solo muestra el payload")
    ] = False,
) -> None:
    """Ejecuta el envío completo: honeypot, validación, transporte y banner."""
    transport = build_transport(endpoint, dry_run)
    page = load_page(page_path, transport)
    session = select_session(page, form_id)
    apply_values(page, session, parse_assignments(assignments, data_file))

    outcome = asyncio.run(page.submit(session.form_id))
    if outcome is None:
        print_warning(f"El formulario '{session.form_id}' no usa data-validate.")
        raise typer.Exit(1)

    console = get_console()
    if outcome == SubmitOutcome.BLOCKED:
        console.print(build_form_table(session))

    banner = build_banner(session)
    if banner is not None and outcome != SubmitOutcome.DISCARDED:
        console.print(banner)

    if dry_run and outcome == SubmitOutcome.SENT:
        for payload in transport.payloads:
            console.print_json(data=payload)

    if outcome not in (SubmitOutcome.SENT, SubmitOutcome.DISCARDED):
        raise typer.Exit(1)
