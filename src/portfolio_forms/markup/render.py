"""
Presentación derivada del estado.

Las clases CSS, los mensajes de error y el banner se escriben en el HTML
a partir del estado de cada sesión; nunca se leen de vuelta.
"""

from typing import Optional

from bs4 import BeautifulSoup, Tag

from portfolio_forms.models import BannerKind, FieldType, FieldValidity, FormSession

from .page import Page
from .parser import CHECKBOX_DEFAULT_VALUE, iter_forms, iter_field_tags


VALIDITY_CLASSES = {
    FieldValidity.VALID: "valid",
    FieldValidity.INVALID: "error",
}


def _set_classes(tag: Tag, remove: set[str], add: Optional[str]) -> None:
    classes = [c for c in tag.get("class", []) if c not in remove]
    if add:
        classes.append(add)
    if classes:
        tag["class"] = classes
    elif tag.has_attr("class"):
        del tag["class"]


def _set_checked(tag: Tag, checked: bool) -> None:
    if checked:
        tag["checked"] = ""
    elif tag.has_attr("checked"):
        del tag["checked"]


def _set_disabled(tag: Tag, disabled: bool) -> None:
    if disabled:
        tag["disabled"] = ""
    elif tag.has_attr("disabled"):
        del tag["disabled"]


# Elementos que se insertan justo después de un control
_ANNOTATION_CLASSES = {"error-message", "form-counter"}


def _following_with_class(tag: Tag, name: str, css_class: str) -> Optional[Tag]:
    """Busca una anotación entre los hermanos generados inmediatamente después del control."""
    for sibling in tag.find_next_siblings():
        classes = set(sibling.get("class", []))
        if not classes & _ANNOTATION_CLASSES:
            return None
        if sibling.name == name and css_class in classes:
            return sibling
    return None


def render_field(
    soup: BeautifulSoup,
    tag: Tag,
    session: FormSession,
    annotate: bool = True,
) -> None:
    """
    Aplica valor, validez, error y estado deshabilitado a un control.

    Con `annotate=False` no se escribe el mensaje de error (opciones
    siguientes de un grupo radio, que lo muestra una sola vez).
    """
    fld = session.get_field(tag["name"])
    if fld is None:
        return

    if fld.field_type == FieldType.CHECKBOX:
        _set_checked(tag, fld.checked)
    elif fld.field_type == FieldType.RADIO:
        _set_checked(tag, tag.get("value", CHECKBOX_DEFAULT_VALUE) == fld.value)
    elif tag.name == "textarea":
        tag.string = fld.value
    elif tag.name == "input" and not fld.is_file:
        tag["value"] = fld.value

    _set_classes(tag, set(VALIDITY_CLASSES.values()), VALIDITY_CLASSES.get(fld.validity))
    _set_disabled(tag, fld.disabled)

    existing = _following_with_class(tag, "span", "error-message")
    if existing is not None:
        existing.decompose()
    if fld.error is not None and annotate:
        span = soup.new_tag("span", attrs={"class": "error-message", "role": fld.error.role})
        span.string = fld.error.message
        tag.insert_after(span)


def render_status(soup: BeautifulSoup, form: Tag, session: FormSession) -> None:
    """Crea o actualiza el único banner de estado del formulario."""
    status = form.find(class_="form-status")
    banner = session.banner
    if banner is None:
        if status is not None:
            status.decompose()
        return

    if status is None:
        status = soup.new_tag(
            "div", attrs={"role": "status", "aria-live": "polite"}
        )
        form.append(status)

    status["class"] = banner.css_class.split()
    status.clear()
    if banner.kind == BannerKind.LOADING:
        status.append(soup.new_tag("div", attrs={"class": "form-loading"}))
        label = soup.new_tag("span")
        label.string = banner.message
        status.append(label)
    else:
        status.string = banner.message


def render_submit(form: Tag, session: FormSession) -> None:
    submit = form.find("button", attrs={"type": "submit"})
    if submit is None:
        return
    submit.string = session.submit_label
    _set_disabled(submit, session.submit_disabled)


def render_widgets(soup: BeautifulSoup, form_id: str, form: Tag, page: Page) -> None:
    """Actualiza contadores y visores de archivos del formulario."""
    for tag in iter_field_tags(form):
        key = (form_id, tag["name"])

        counter = page.counters.get(key)
        if counter is not None:
            counter_tag = _following_with_class(tag, "div", "form-counter")
            if counter_tag is None:
                counter_tag = soup.new_tag("div", attrs={"class": "form-counter"})
                tag.insert_after(counter_tag)
            counter_tag.string = counter.text
            _set_classes(counter_tag, {"limit-reached"}, "limit-reached" if counter.limit_reached else None)

        selector = page.file_selectors.get(key)
        if selector is not None:
            wrapper = tag.find_parent(class_="form-file")
            name_display = wrapper.find(class_="form-file-name") if wrapper is not None else None
            if name_display is not None:
                name_display.string = selector.display


def render_page(page: Page, html: Optional[str] = None) -> str:
    """
    Genera el HTML con la presentación derivada del estado actual.

    Args:
        page: Página con sesiones y widgets
        html: Documento base (default: el HTML con que se creó la página)

    Returns:
        HTML resultante
    """
    soup = BeautifulSoup(html if html is not None else page.html, "html.parser")
    for form_id, form in iter_forms(soup):
        session = page.sessions.get(form_id)
        if session is None:
            continue
        annotated: set[str] = set()
        for tag in iter_field_tags(form):
            render_field(soup, tag, session, annotate=tag["name"] not in annotated)
            annotated.add(tag["name"])
        render_widgets(soup, form_id, form, page)
        if form_id in page.controllers:
            render_status(soup, form, session)
            render_submit(form, session)
    return str(soup)
