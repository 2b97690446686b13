"""
Validación de campos de formulario.

Las reglas se aplican en orden fijo y se detienen en el primer fallo,
de modo que un campo nunca muestra más de un error:

1. Requerido y vacío
2. Forma según tipo (email, URL) si hay valor
3. Longitud mínima
4. Longitud máxima
5. Patrón (mensaje personalizado del campo o genérico)
"""

import re
from typing import Optional

from pydantic import AnyUrl, TypeAdapter, ValidationError

from portfolio_forms.config import FormMessages
from portfolio_forms.models import FormField, FieldType


EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

_URL_ADAPTER = TypeAdapter(AnyUrl)
_DEFAULT_MESSAGES = FormMessages()


def is_valid_email(value: str) -> bool:
    """Verifica la forma básica de un email (algo@algo.algo, sin espacios)."""
    return EMAIL_PATTERN.match(value) is not None


def is_valid_url(value: str) -> bool:
    """Verifica que el valor sea una URL absoluta con esquema."""
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def matches_pattern(pattern: str, value: str) -> bool:
    """Evalúa el patrón declarado; un patrón inválido no bloquea el campo."""
    try:
        return re.search(pattern, value) is not None
    except re.error:
        return True


def check_field(
    field: FormField,
    messages: Optional[FormMessages] = None,
) -> tuple[bool, str]:
    """
    Valida el valor actual de un campo sin modificarlo.

    Args:
        field: Campo a validar
        messages: Textos de error (default: mensajes en inglés)

    Returns:
        (True, "") si es válido, (False, mensaje) en caso contrario
    """
    msgs = messages or _DEFAULT_MESSAGES
    value = field.effective_value.strip()

    if field.required and not value:
        return False, msgs.required

    if value:
        if field.field_type == FieldType.EMAIL and not is_valid_email(value):
            return False, msgs.invalid_email
        if field.field_type == FieldType.URL and not is_valid_url(value):
            return False, msgs.invalid_url

    if field.min_length is not None and len(value) < field.min_length:
        return False, msgs.min_length.format(n=field.min_length)

    if field.max_length is not None and len(value) > field.max_length:
        return False, msgs.max_length.format(n=field.max_length)

    if field.pattern is not None and not matches_pattern(field.pattern, value):
        return False, field.title or msgs.invalid_format

    return True, ""


def validate_field(field: FormField, messages: Optional[FormMessages] = None) -> bool:
    """
    Valida un campo y actualiza su estado y anotación de error.

    Llamarlo repetidamente con el mismo valor deja el mismo resultado y
    como máximo una anotación.
    """
    valid, error_msg = check_field(field, messages)
    if valid:
        field.mark_valid()
    else:
        field.mark_invalid(error_msg)
    return valid
