import math
import re
from decimal import ROUND_HALF_UP, Decimal

# Prefixo numérico aceito, como um parseFloat: '7.5 pts' vale 7.5, 'abc' não vale nada.
_PREFIXO_NUMERICO = re.compile(r'\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)')

CENTESIMOS = Decimal('0.01')


def converter_numero(texto):
    texto = str(texto or '0').replace(',', '.', 1)
    encontrado = _PREFIXO_NUMERICO.match(texto)
    if not encontrado:
        return math.nan
    return float(encontrado.group(1))


def formatar_numero(valor):
    # Decimal(valor) usa o valor binário exato, então o arredondamento é o mesmo da planilha.
    return str(Decimal(valor).quantize(CENTESIMOS, rounding=ROUND_HALF_UP)).replace('.', ',')


def calcular_media(notas):
    # Notas vazias, zeradas ou inválidas ficam de fora; sem nenhuma válida, ''.
    validas = [n for n in map(converter_numero, notas) if n > 0 and math.isfinite(n)]
    if not validas:
        return ''
    return formatar_numero(sum(validas) / len(validas))
