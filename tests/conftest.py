"""Configuración de pytest para tests de portfolio_forms."""

import pytest

from portfolio_forms.core import FormController, MemoryTransport
from portfolio_forms.models import FormField, FieldType, FormSession


CONTACT_HTML = """
<html>
<body>
  <form id="contact-form" data-validate action="/thanks">
    <label for="name">Name</label>
    <input id="name" name="name" type="text" required minlength="2">
    <label for="email">Email</label>
    <input id="email" name="email" type="email" required>
    <label for="website-url">Website</label>
    <input id="website-url" name="url" type="url">
    <label for="message">Message</label>
    <textarea id="message" name="message" maxlength="500" data-counter required></textarea>
    <div class="form-file">
      <input type="file" name="attachment">
      <span class="form-file-label">Attach</span>
      <span class="form-file-name"></span>
    </div>
    <div class="form-honeypot">
      <input type="text" name="website" tabindex="-1" autocomplete="off">
    </div>
    <button type="submit">Send Message</button>
  </form>
  <form id="newsletter">
    <input name="subscriber" type="email">
    <button type="submit">Subscribe</button>
  </form>
</body>
</html>
"""


@pytest.fixture
def contact_html():
    """HTML de la página de contacto."""
    return CONTACT_HTML


@pytest.fixture
def contact_page_file(tmp_path):
    """Página de contacto escrita en disco."""
    path = tmp_path / "contact.html"
    path.write_text(CONTACT_HTML, encoding="utf-8")
    return path


@pytest.fixture
def contact_session():
    """Sesión con name (requerido), email (requerido, email) y honeypot."""
    return FormSession.from_fields("contact", [
        FormField(name="name", required=True),
        FormField(name="email", field_type=FieldType.EMAIL, required=True),
        FormField(name="website", honeypot=True),
    ])


@pytest.fixture
def transport():
    """Transporte en memoria que acepta todos los envíos."""
    return MemoryTransport()


@pytest.fixture
def failing_transport():
    """Transporte en memoria que rechaza todos los envíos."""
    return MemoryTransport(fail=True)


@pytest.fixture
def controller(contact_session, transport):
    """Controlador sobre la sesión de contacto."""
    return FormController(contact_session, transport)
