from .erros import ArgumentoInvalido, ColunaAusente, NaoEncontrado, Proibido


def _celula(linha, indice):
    return str(linha[indice]) if indice < len(linha) else ''


def indice_coluna(cabecalho, nome):
    try:
        return cabecalho.index(nome)
    except ValueError:
        return -1


def resolver_colunas(cabecalho, obrigatorias):
    # Falha na primeira coluna que faltar, antes de qualquer busca ou escrita.
    mapa = {}
    for nome in obrigatorias:
        indice = indice_coluna(cabecalho, nome)
        if indice < 0:
            raise ColunaAusente(nome)
        mapa[nome] = indice
    return mapa


def localizar_linha(linhas, indice_coluna_id, identificador):
    alvo = str(identificador or '').strip()
    if not alvo:
        raise ArgumentoInvalido('Identificador vazio.')
    for i, linha in enumerate(linhas):
        if _celula(linha, indice_coluna_id).strip() == alvo:
            return i
    raise NaoEncontrado(f"Registo '{alvo}' não encontrado.")


def _normalizar_nome(nome):
    return str(nome or '').strip().casefold()


def verificar_orientador(linha, indice_coluna_orientador, nome_usuario):
    orientador = _normalizar_nome(_celula(linha, indice_coluna_orientador))
    if not orientador or orientador != _normalizar_nome(nome_usuario):
        raise Proibido('Apenas o orientador do aluno pode lançar as notas.')
