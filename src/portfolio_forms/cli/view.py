"""
Funciones para construir componentes visuales de los formularios.
"""

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from portfolio_forms.cli.theme import get_palette
from portfolio_forms.markup import Page
from portfolio_forms.models import BannerKind, FieldType, FieldValidity, FormSession


def _constraints_text(constraints: dict) -> str:
    parts = []
    for key, value in constraints.items():
        parts.append(key if value is True else f"{key}={value}")
    return ", ".join(parts) if parts else "-"


def build_inspect_table(page: Page) -> Table:
    """Tabla con todos los formularios de la página y sus restricciones."""
    p = get_palette()
    table = Table(
        title="Formularios",
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
    )
    table.add_column("Formulario", justify="left")
    table.add_column("Campo", justify="left")
    table.add_column("Tipo", justify="left")
    table.add_column("Restricciones", justify="left")
    table.add_column("Extras", justify="left")

    for form_id, session in page.sessions.items():
        validated = form_id in page.controllers
        form_label = Text(form_id, style="bold" if validated else p.muted)
        if validated:
            form_label.append(" (data-validate)", style=p.muted)

        for idx, fld in enumerate(session.fields.values()):
            extras = []
            if fld.honeypot:
                extras.append("honeypot")
            if (form_id, fld.name) in page.counters:
                extras.append("contador")
            if (form_id, fld.name) in page.file_selectors:
                extras.append("archivos")
            table.add_row(
                form_label if idx == 0 else "",
                fld.name,
                fld.field_type.value,
                _constraints_text(fld.constraints()),
                ", ".join(extras) or "-",
            )

    return table


def build_form_table(session: FormSession, title: Optional[str] = None) -> Table:
    """Tabla con el valor y el estado de validez de cada campo."""
    p = get_palette()
    table = Table(
        title=title or session.form_id,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        padding=(0, 1),
    )
    table.add_column("Campo", justify="left", width=20)
    table.add_column("Valor", justify="left", width=30)
    table.add_column("Estado", justify="left")

    for fld in session.validated_fields():
        if fld.field_type == FieldType.CHECKBOX:
            value = "sí" if fld.checked else "no"
        else:
            value = fld.effective_value or "-"
        if fld.validity == FieldValidity.VALID:
            status = Text("✓ válido", style=p.success)
        elif fld.validity == FieldValidity.INVALID:
            status = Text(f"✗ {fld.error.message if fld.error else 'inválido'}", style=p.error)
        else:
            status = Text("sin validar", style=p.muted)
        label = Text(fld.display_label, style="bold" if fld.required else p.muted)
        table.add_row(label, Text(value, style=p.accent if fld.effective_value else p.muted), status)

    return table


def build_banner(session: FormSession) -> Optional[Panel]:
    """Panel con el banner de estado del formulario, si existe."""
    banner = session.banner
    if banner is None:
        return None
    p = get_palette()
    styles = {
        BannerKind.LOADING: p.info,
        BannerKind.SUCCESS: p.success,
        BannerKind.ERROR: p.error,
    }
    style = styles[banner.kind]
    return Panel(
        Text(banner.message, style=f"bold {style}"),
        border_style=style,
        box=box.ROUNDED,
        padding=(0, 1),
    )
