"""Cadastrapp plot-selection state kernel."""

__version__ = "0.1.0"
