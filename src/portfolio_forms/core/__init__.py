"""
Núcleo de portfolio-forms.

- validation: Reglas de validación de campos
- controller: Controlador de formulario y máquina de estados de envío
- transport: Transportes de envío (HTTP, memoria, callable)
- widgets: Contador de caracteres y visor de archivos
- preferences: Preferencias persistidas, tema y menú
"""

from portfolio_forms.core.validation import (
    EMAIL_PATTERN,
    check_field,
    validate_field,
    is_valid_email,
    is_valid_url,
)
from portfolio_forms.core.transport import (
    Transport,
    TransportError,
    HttpTransport,
    MemoryTransport,
    CallableTransport,
)
from portfolio_forms.core.controller import FormController
from portfolio_forms.core.widgets import CharacterCounter, FileSelector
from portfolio_forms.core.preferences import (
    PreferenceStore,
    ThemeController,
    ThemeMode,
    MenuController,
)

__all__ = [
    # Validación
    "EMAIL_PATTERN",
    "check_field",
    "validate_field",
    "is_valid_email",
    "is_valid_url",
    # Transporte
    "Transport",
    "TransportError",
    "HttpTransport",
    "MemoryTransport",
    "CallableTransport",
    # Controladores
    "FormController",
    "CharacterCounter",
    "FileSelector",
    "PreferenceStore",
    "ThemeController",
    "ThemeMode",
    "MenuController",
]
