"""
Lectura del contrato de marcado del HTML renderizado.

- `form[data-validate]` activa el controlador de validación
- Restricciones con atributos estándar (required, type, minlength, ...)
- El honeypot va envuelto en `.form-honeypot`
- `textarea[data-counter]` activa el contador de caracteres
- Cada `input[type=file]` tiene un visor de archivos
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag

from portfolio_forms.models import FormField, FieldType


HONEYPOT_CLASS = "form-honeypot"
DEFAULT_SUBMIT_LABEL = "Send"
# Valor que envía un checkbox o radio sin atributo `value`
CHECKBOX_DEFAULT_VALUE = "on"

# Inputs que no son campos de datos
_NON_DATA_INPUTS = {"submit", "button", "reset", "image"}


@dataclass
class ParsedForm:
    """Formulario encontrado en el HTML."""
    form_id: str
    validate: bool
    fields: list[FormField] = field(default_factory=list)
    submit_label: str = DEFAULT_SUBMIT_LABEL
    counter_fields: list[str] = field(default_factory=list)
    file_fields: list[str] = field(default_factory=list)


def _int_attr(tag: Tag, name: str) -> Optional[int]:
    raw = tag.get(name)
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


def form_identifier(form: Tag, index: int) -> str:
    """Identificador estable de un formulario (id, name o posición)."""
    return form.get("id") or form.get("name") or f"form-{index + 1}"


def iter_forms(soup: BeautifulSoup) -> Iterator[tuple[str, Tag]]:
    """Recorre los formularios del documento con su identificador."""
    for idx, form in enumerate(soup.find_all("form")):
        yield form_identifier(form, idx), form


def iter_field_tags(form: Tag) -> Iterator[Tag]:
    """Recorre los controles con nombre del formulario, en orden de documento."""
    for tag in form.find_all(["input", "textarea", "select"]):
        if not tag.get("name"):
            continue
        if tag.name == "input" and str(tag.get("type", "")).lower() in _NON_DATA_INPUTS:
            continue
        yield tag


def _field_type(tag: Tag) -> FieldType:
    if tag.name == "textarea":
        return FieldType.TEXTAREA
    if tag.name == "select":
        return FieldType.SELECT
    return FieldType.from_attr(tag.get("type"))


def _initial_value(tag: Tag) -> str:
    if tag.name == "textarea":
        return tag.get_text()
    if tag.name == "select":
        selected = tag.find("option", selected=True) or tag.find("option")
        if selected is None:
            return ""
        value = selected.get("value")
        return value if value is not None else selected.get_text(strip=True)
    field_type = _field_type(tag)
    if field_type == FieldType.FILE:
        return ""
    if field_type == FieldType.CHECKBOX:
        return tag.get("value", CHECKBOX_DEFAULT_VALUE)
    if field_type == FieldType.RADIO:
        return tag.get("value", CHECKBOX_DEFAULT_VALUE) if tag.has_attr("checked") else ""
    return tag.get("value", "")


def _label_for(form: Tag, tag: Tag) -> str:
    field_id = tag.get("id")
    if field_id:
        label = form.find("label", attrs={"for": field_id})
        if label is not None:
            return label.get_text(" ", strip=True)
    parent_label = tag.find_parent("label")
    if parent_label is not None:
        return parent_label.get_text(" ", strip=True)
    return ""


def _legend_for(tag: Tag) -> str:
    fieldset = tag.find_parent("fieldset")
    legend = fieldset.find("legend") if fieldset is not None else None
    return legend.get_text(" ", strip=True) if legend is not None else ""


def parse_field(form: Tag, tag: Tag, honeypot_name: str = "website") -> FormField:
    """Construye un FormField a partir de un control HTML."""
    name = tag["name"]
    honeypot = tag.find_parent(class_=HONEYPOT_CLASS) is not None or name == honeypot_name
    return FormField(
        name=name,
        field_type=_field_type(tag),
        required=tag.has_attr("required"),
        min_length=_int_attr(tag, "minlength"),
        max_length=_int_attr(tag, "maxlength"),
        pattern=tag.get("pattern"),
        title=tag.get("title"),
        label=_label_for(form, tag),
        honeypot=honeypot,
        value=_initial_value(tag),
        disabled=tag.has_attr("disabled"),
        checked=tag.has_attr("checked"),
    )


def _merge_radio(group: FormField, fld: FormField, option: str) -> None:
    """Agrega una opción a un grupo radio ya leído (mismo `name`)."""
    group.options.append(option)
    group.required = group.required or fld.required
    if fld.value:
        group.value = fld.value


def parse_form(form: Tag, form_id: str, honeypot_name: str = "website") -> ParsedForm:
    """Extrae campos, contadores y campos de archivo de un formulario."""
    parsed = ParsedForm(form_id=form_id, validate=form.has_attr("data-validate"))

    radios: dict[str, FormField] = {}
    for tag in iter_field_tags(form):
        fld = parse_field(form, tag, honeypot_name)
        if fld.field_type == FieldType.RADIO:
            option = tag.get("value", CHECKBOX_DEFAULT_VALUE)
            group = radios.get(fld.name)
            if group is not None:
                _merge_radio(group, fld, option)
                continue
            fld.options.append(option)
            fld.label = _legend_for(tag)
            radios[fld.name] = fld
        parsed.fields.append(fld)
        if tag.name == "textarea" and tag.has_attr("data-counter"):
            parsed.counter_fields.append(fld.name)
        if fld.is_file:
            parsed.file_fields.append(fld.name)

    submit = form.find("button", attrs={"type": "submit"})
    if submit is not None and submit.get_text(strip=True):
        parsed.submit_label = submit.get_text(strip=True)

    return parsed


def parse_html(html: str, honeypot_name: str = "website") -> list[ParsedForm]:
    """Lee todos los formularios de un documento HTML."""
    soup = BeautifulSoup(html, "html.parser")
    return [parse_form(form, form_id, honeypot_name) for form_id, form in iter_forms(soup)]
