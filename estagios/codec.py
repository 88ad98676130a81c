from .erros import ArgumentoInvalido

# Linha 1 da planilha é o cabeçalho; o primeiro registo está na linha 2.
LINHAS_ANTES_DOS_DADOS = 2


def separar_cabecalho(grade):
    if not grade:
        return [], []
    return list(grade[0]), list(grade[1:])


def linha_para_registro(cabecalho, linha):
    # Linhas curtas: campos finais ficam ausentes, não vazios.
    return {nome: linha[i] for i, nome in enumerate(cabecalho) if i < len(linha)}


def decodificar_registros(grade):
    cabecalho, linhas = separar_cabecalho(grade)
    return [linha_para_registro(cabecalho, linha) for linha in linhas]


def codificar_registros(cabecalho, registros):
    grade = [list(cabecalho)]
    for registro in registros:
        linha = [registro.get(nome, '') for nome in cabecalho]
        while linha and linha[-1] == '':
            linha.pop()
        grade.append(linha)
    return grade


def coluna_para_letra(indice):
    """0 -> A, 25 -> Z, 26 -> AA, 701 -> ZZ, 702 -> AAA (base 26 bijetiva)."""
    if isinstance(indice, bool) or not isinstance(indice, int) or indice < 0:
        raise ArgumentoInvalido(f'Índice de coluna inválido: {indice!r}')
    letra = ''
    while indice >= 0:
        indice, resto = divmod(indice, 26)
        letra = chr(resto + 65) + letra
        indice -= 1
    return letra


def numero_linha(indice_dados):
    # Posição na lista de dados -> número da linha na planilha (1-based)
    if indice_dados < 0:
        raise ArgumentoInvalido(f'Índice de linha inválido: {indice_dados!r}')
    return indice_dados + LINHAS_ANTES_DOS_DADOS


def referencia_aba(aba):
    return "'{}'".format(aba.replace("'", "''"))


def referencia_celula(aba, indice_coluna, numero):
    return f'{referencia_aba(aba)}!{coluna_para_letra(indice_coluna)}{numero}'
