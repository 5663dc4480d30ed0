"""Rotas do plugin (webhook do kernel)."""
