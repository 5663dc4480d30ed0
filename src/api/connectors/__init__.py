"""Connectors — adapters de borda para quem chama o serviço.

Estrutura:
- plugin/: webhook assinado enviado pelo kernel
"""
