"""
Modelos de datos para portfolio-forms.

Campos, sesiones de formulario, banners y eventos.
"""

from portfolio_forms.models.field import (
    FieldType,
    FieldValidity,
    ErrorAnnotation,
    FormField,
    SelectedFile,
    FieldEvent,
    EventKind,
)
from portfolio_forms.models.session import (
    SubmissionState,
    BannerKind,
    SubmitOutcome,
    StatusBanner,
    FormSession,
    STATE_BANNER_KIND,
)

__all__ = [
    # Campos
    "FieldType",
    "FieldValidity",
    "ErrorAnnotation",
    "FormField",
    "SelectedFile",
    # Eventos
    "FieldEvent",
    "EventKind",
    # Sesión
    "SubmissionState",
    "BannerKind",
    "SubmitOutcome",
    "StatusBanner",
    "FormSession",
    "STATE_BANNER_KIND",
]
