"""
portfolio-forms - Formularios del sitio portfolio.

Validación de campos, máquina de estados de envío y widgets auxiliares
para los formularios del HTML renderizado del sitio.
"""

__version__ = "0.1.0"
