"""Utilidades transversales (logging)."""
