"""API — camada de borda.

Responsabilidades:
- Receber o webhook assinado do kernel
- Validar método, Content-Type e assinatura
- Responder com os códigos HTTP do contrato do plugin

Subpastas:
- connectors/: transporte, parse e verificação por origem
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: regras do runner nem decode de settings.
"""
