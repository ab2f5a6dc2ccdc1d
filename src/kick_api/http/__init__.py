"""Camada HTTP: fronteira wire (wire.py) e pipeline autenticado (pipeline.py)."""
