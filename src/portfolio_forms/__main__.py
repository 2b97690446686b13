"""Permite ejecutar `python -m portfolio_forms`."""

from portfolio_forms.cli import app

app()
