"""
Contrato de marcado: lectura del HTML renderizado, vinculación de la
página y presentación derivada del estado.
"""

from portfolio_forms.markup.parser import (
    HONEYPOT_CLASS,
    ParsedForm,
    parse_html,
    parse_form,
    parse_field,
)
from portfolio_forms.markup.page import Page
from portfolio_forms.markup.render import render_page

__all__ = [
    "HONEYPOT_CLASS",
    "ParsedForm",
    "parse_html",
    "parse_form",
    "parse_field",
    "Page",
    "render_page",
]
