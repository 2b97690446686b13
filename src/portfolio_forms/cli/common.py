"""
Utilidades comunes para los comandos CLI.

Configuración activa, logging, carga de páginas y valores de campos.
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from portfolio_forms.cli.theme import print_error
from portfolio_forms.config import Settings, load_settings
from portfolio_forms.core import HttpTransport, MemoryTransport, Transport
from portfolio_forms.markup import Page
from portfolio_forms.models import FormSession


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Obtiene la configuración activa (la carga la primera vez)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def set_settings(settings: Settings) -> None:
    global _settings
    _settings = settings


def setup_logging(verbose: bool = False) -> None:
    """Instala RichHandler en el logger del paquete."""
    logger = logging.getLogger("portfolio_forms")
    logger.handlers.clear()
    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def build_transport(endpoint: Optional[str] = None, dry_run: bool = False) -> Transport:
    """
    Crea el transporte de envío.

    Args:
        endpoint: URL del backend (default: la de la configuración)
        dry_run: Si True, no envía nada y solo registra el payload
    """
    settings = get_settings()
    if dry_run:
        return MemoryTransport()
    url = endpoint or settings.endpoint
    if not url:
        print_error("No hay endpoint configurado. Use --endpoint o --dry-run.")
        raise typer.Exit(1)
    return HttpTransport(url, timeout=settings.timeout_s)


def load_page(path: Path, transport: Optional[Transport] = None) -> Page:
    """Carga una página HTML; termina con error si no existe."""
    if not path.exists():
        print_error(f"Archivo no encontrado: {path}")
        raise typer.Exit(1)
    return Page.from_file(path, transport or MemoryTransport(), get_settings())


def select_session(page: Page, form_id: Optional[str]) -> FormSession:
    """Obtiene el formulario pedido (o el primero validado)."""
    try:
        return page.get_session(form_id)
    except (KeyError, ValueError) as e:
        print_error(str(e).strip("'\""))
        raise typer.Exit(1)


def parse_assignments(assignments: Optional[list[str]], data_file: Optional[Path]) -> dict[str, str]:
    """
    Combina valores de `--data archivo.json` y `--set nombre=valor`.

    Los valores de `--set` tienen prioridad.
    """
    values: dict[str, str] = {}
    if data_file is not None:
        if not data_file.exists():
            print_error(f"Archivo no encontrado: {data_file}")
            raise typer.Exit(1)
        with open(data_file, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            print_error("El archivo de datos debe contener un objeto JSON")
            raise typer.Exit(1)
        values.update({str(k): str(v) for k, v in data.items()})

    for item in assignments or []:
        if "=" not in item:
            print_error(f"Formato inválido (se espera nombre=valor): {item}")
            raise typer.Exit(1)
        name, value = item.split("=", 1)
        values[name.strip()] = value

    return values


def apply_values(page: Page, session: FormSession, values: dict[str, str]) -> None:
    """Carga valores en los campos, como si el usuario los hubiera tipeado."""
    for name, value in values.items():
        if session.get_field(name) is None:
            print_error(f"Campo no encontrado en '{session.form_id}': {name}")
            raise typer.Exit(1)
        try:
            page.input(session.form_id, name, value)
        except ValueError as e:
            print_error(str(e))
            raise typer.Exit(1)
