"""Configuração do cliente Kick (settings e logging)."""
