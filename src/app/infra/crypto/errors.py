"""Erros de criptografia da verificação de assinatura do kernel."""


class SignatureDecodeError(ValueError):
    """Chave pública ou assinatura malformada (base64, PEM ou SPKI inválidos).

    Distinto de "assinatura não confere": este erro não é tratado pelo gate
    e termina no handler de erros não capturados (500).
    """
