"""App — núcleo do serviço: wiring, domínio, despacho e infraestrutura.

Subpastas:
- bootstrap/: composition root (logging, validação de settings, runner)
- coordinators/: verificação concluída → runner
- use_cases/: runner padrão do plugin
- domain/: schema de settings e inputs do plugin
- infra/: implementações concretas (crypto)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura.
"""
