# painel/utils/text_utils.py
import math
from decimal import Decimal
from typing import Any, Optional

MESES_ABREVIADOS = ["jan", "fev", "mar", "abr", "mai", "jun", "jul", "ago", "set", "out", "nov", "dez"]


def capitalize_first(s: str) -> str:
    """Coloca só a primeira letra em maiúscula, sem mexer no resto.
    Ex: "jan/26" -> "Jan/26"
    """
    if not s:
        return ""
    return s[0].upper() + s[1:]


def month_label(year: int, month: int) -> str:
    """Rótulo curto do mês em pt-BR, no formato "Mmm/aa". Ex: (2026, 2) -> "Fev/26"."""
    return capitalize_first(f"{MESES_ABREVIADOS[month - 1]}/{year % 100:02d}")


def parse_valor(value: Any) -> Optional[float]:
    """Converte o valor de um lançamento para float.

    Aceita números e textos como "150", "150.5", "1.234,56" ou "R$ 1.234,56".
    Retorna None quando o valor não é numérico (o lançamento fica fora das somas).
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    else:
        s = str(value).strip().replace("R$", "").replace(" ", "")
        if not s:
            return None
        if "," in s:
            # Formato brasileiro: ponto como milhar, vírgula como decimal
            s = s.replace(".", "").replace(",", ".")
        try:
            number = float(s)
        except ValueError:
            return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_brl(x: Optional[float]) -> str:
    """Formata um valor como moeda brasileira. Ex: 1234.5 -> "R$ 1.234,50"."""
    if x is None:
        x = 0.0
    negative = x < 0
    s = f"{abs(x):,.2f}"
    s = s.replace(",", "X").replace(".", ",").replace("X", ".")
    return f"-R$ {s}" if negative else f"R$ {s}"
