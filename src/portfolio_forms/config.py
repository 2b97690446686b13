"""Modelos Pydantic para configuración y mensajes de los formularios."""

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


CONFIG_ENV_VAR = "PORTFOLIO_FORMS_CONFIG"
DEFAULT_HOME = Path.home() / ".portfolio_forms"

MEGABYTE = 1024 * 1024


class FormMessages(BaseModel):
    """Textos visibles para el usuario."""
    required: str = "This field is required"
    invalid_email: str = "Please enter a valid email address"
    invalid_url: str = "Please enter a valid URL"
    min_length: str = "Minimum {n} characters required"
    max_length: str = "Maximum {n} characters allowed"
    invalid_format: str = "Invalid format"
    fix_errors: str = "Please fix the errors above"
    sending: str = "Sending message..."
    sending_label: str = "Sending..."
    success: str = "Message sent successfully! I'll get back to you soon."
    failure: str = "Failed to send message. Please try again or email me directly."
    file_too_large: str = "File size must be less than {limit}"


class Settings(BaseModel):
    """Configuración general."""
    endpoint: Optional[str] = Field(None, description="URL del backend de formularios")
    timeout_s: float = Field(default=10.0, gt=0, description="Timeout HTTP (s)")
    honeypot_name: str = Field(default="website", min_length=1)
    max_file_size: int = Field(default=5 * MEGABYTE, gt=0, description="Tamaño máximo de archivo (bytes)")
    counter_default_max: int = Field(default=500, gt=0)
    mobile_breakpoint_px: int = Field(default=768, gt=0)
    preferences_path: Path = Field(default=DEFAULT_HOME / "preferences.json")
    messages: FormMessages = Field(default_factory=FormMessages)

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError("endpoint debe ser una URL http(s)")
        return v


def default_config_path() -> Path:
    """Ruta del archivo de configuración (variable de entorno o ~/.portfolio_forms)."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_HOME / "config.json"


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Carga la configuración desde JSON.

    Args:
        path: Archivo de configuración. Default: `default_config_path()`

    Returns:
        Settings con los valores del archivo o los defaults si no existe
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return Settings()

    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)
    return Settings.model_validate(data)
