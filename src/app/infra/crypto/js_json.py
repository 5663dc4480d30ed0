"""Serialização JSON byte a byte igual ao `JSON.stringify` do emissor.

O kernel assina o texto produzido pelo runtime JavaScript; `json.dumps`
diverge em dois pontos que quebram a verificação:
- números: JS usa `Number.prototype.toString` (`1e-7`, `0.00001`, `1` para `1.0`)
- surrogates isolados: JS emite o escape `\\udXXX` (well-formed stringify)
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

_SURROGATES = re.compile("[\ud800-\udbff][\udc00-\udfff]|[\ud800-\udfff]")


def _fix_surrogate(match: re.Match[str]) -> str:
    text = match.group(0)
    if len(text) == 2:
        high, low = (ord(char) for char in text)
        return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))
    return f"\\u{ord(text):04x}"


def stringify_string(value: str) -> str:
    """Escapa string como JSON.stringify (sem escape de não-ASCII)."""
    return _SURROGATES.sub(_fix_surrogate, json.dumps(value, ensure_ascii=False))


def stringify_number(value: float) -> str:
    """Formata float como `Number.prototype.toString`.

    Raises:
        ValueError: Para NaN/Infinity (não chegam do parse estrito)
    """
    if not math.isfinite(value):
        raise ValueError(f"Out of range float value: {value!r}")
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr já devolve os dígitos mais curtos que fazem round-trip, como o JS
    mantissa, _, exponent = repr(abs(value)).partition("e")
    integer, _, fraction = mantissa.partition(".")
    digits = integer + fraction
    point = len(integer) + int(exponent or 0)
    stripped = digits.lstrip("0")
    point -= len(digits) - len(stripped)
    digits = stripped.rstrip("0")
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + "0" * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    exp = point - 1
    exp_text = f"e{'+' if exp >= 0 else '-'}{abs(exp)}"
    if k == 1:
        return sign + digits + exp_text
    return sign + digits[0] + "." + digits[1:] + exp_text


def stringify(value: Any) -> str:
    """JSON compacto na ordem de inserção, no formato do JSON.stringify.

    Raises:
        TypeError: Para tipos que não vêm de um parse JSON
    """
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return stringify_string(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return stringify_number(value)
    if isinstance(value, dict):
        items = (f"{stringify_string(key)}:{stringify(item)}" for key, item in value.items())
        return "{" + ",".join(items) + "}"
    if isinstance(value, list | tuple):
        return "[" + ",".join(stringify(item) for item in value) + "]"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
