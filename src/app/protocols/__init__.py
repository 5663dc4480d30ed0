"""Protocolos e contratos do core da aplicação."""

from .plugin_runner import PluginRunnerProtocol

__all__ = ["PluginRunnerProtocol"]
