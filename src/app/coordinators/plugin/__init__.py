"""Coordinator do plugin: verificação concluída → runner."""

from .dispatch import dispatch_plugin_payload

__all__ = ["dispatch_plugin_payload"]
