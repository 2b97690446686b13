"""
CLI de portfolio-forms - Formularios del sitio portfolio.

Comandos:
- inspect: Lista formularios, campos y restricciones de una página
- validate: Valida un formulario con valores dados
- submit: Envío completo (honeypot, validación, transporte)
- fill: Llenado interactivo
- theme: Preferencia de tema claro/oscuro
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from portfolio_forms.cli.common import set_settings, setup_logging
from portfolio_forms.cli.fill import fill_form
from portfolio_forms.cli.forms import inspect, submit, validate
from portfolio_forms.cli.prefs import get_theme_controller, theme_command
from portfolio_forms.cli.theme import CLITheme, print_error, print_warning
from portfolio_forms.config import load_settings


app = typer.Typer(
    name="portfolio-forms",
    help="Validación y envío de los formularios del sitio portfolio.",
    no_args_is_help=True,
)

app.command()(inspect)
app.command()(validate)
app.command()(submit)
app.command("fill")(fill_form)
app.command("theme")(theme_command)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Logging detallado")] = False,
    config: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="Archivo de configuración JSON")
    ] = None,
):
    """
    portfolio-forms - Formularios del sitio portfolio.

    Lee el HTML renderizado, valida campos y envía mensajes.
    """
    setup_logging(verbose)

    if config is not None and not config.exists():
        print_error(f"Archivo de configuración no encontrado: {config}")
        raise typer.Exit(1)

    # ValidationError de pydantic y JSONDecodeError son ValueError
    try:
        set_settings(load_settings(config))
    except ValueError as e:
        print_error(f"Configuración inválida: {e}")
        raise typer.Exit(1)

    # JSONDecodeError es ValueError
    try:
        CLITheme.set_theme(get_theme_controller().theme)
    except ValueError as e:
        print_warning(f"Preferencias ilegibles, se usa el tema por defecto: {e}")


__all__ = ["app"]
