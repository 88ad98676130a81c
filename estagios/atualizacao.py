from collections import namedtuple

from .codec import referencia_celula
from .filtros import COL_ID, COL_STATUS, STATUS_CONCLUIDO
from .localizador import indice_coluna

Escrita = namedtuple('Escrita', ['intervalo', 'valor'])

COL_NOTA_SUPERVISOR = 'Nota Supervisor'
COL_NOTA_RELATORIO = 'Nota Relatório'
COL_NOTA_DEFESA = 'Nota da Defesa'
COL_MEDIA = 'Média'
COL_OBSERVACOES = 'Observações'

# USER_ENTERED: a planilha interpreta o texto ('8,5' vira número, '=...' vira fórmula).
# RAW: grava o texto como veio.
ENTRADA_INTERPRETADA = 'USER_ENTERED'
ENTRADA_LITERAL = 'RAW'


def montar_lote(aba, numero, valores_por_coluna):
    # valores_por_coluna: {indice_coluna: valor}, na ordem em que devem ser escritos
    return [
        Escrita(referencia_celula(aba, indice, numero), valor)
        for indice, valor in valores_por_coluna.items()
    ]


def montar_lote_notas(aba, colunas, numero, notas, media, observacoes):
    supervisor, relatorio, defesa = notas
    valores = {
        colunas[COL_NOTA_SUPERVISOR]: supervisor,
        colunas[COL_NOTA_RELATORIO]: relatorio,
        colunas[COL_NOTA_DEFESA]: defesa,
        colunas[COL_MEDIA]: media,
        colunas[COL_OBSERVACOES]: observacoes,
    }
    return montar_lote(aba, numero, valores)


def montar_lote_dinamico(aba, cabecalho, numero, campos, coluna_id=COL_ID):
    """Campos que não existem no cabeçalho são ignorados; no fim marca o status como concluído."""
    escritas = []
    for nome, valor in campos.items():
        if nome == coluna_id or isinstance(valor, (dict, list)):
            continue
        indice = indice_coluna(cabecalho, nome)
        if indice < 0:
            continue
        escritas.append(Escrita(referencia_celula(aba, indice, numero), _texto(valor)))

    indice_status = indice_coluna(cabecalho, COL_STATUS)
    if indice_status >= 0:
        escritas.append(Escrita(referencia_celula(aba, indice_status, numero), STATUS_CONCLUIDO))
    return escritas


def _texto(valor):
    if valor is None:
        return ''
    if isinstance(valor, bool):
        return 'TRUE' if valor else 'FALSE'
    return valor if isinstance(valor, str) else str(valor)


def corpo_batch_update(escritas, entrada=ENTRADA_INTERPRETADA):
    return {
        'valueInputOption': entrada,
        'data': [{'range': e.intervalo, 'values': [[e.valor]]} for e in escritas],
    }
