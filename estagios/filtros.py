import re

# --- CABEÇALHOS DA PLANILHA DE ALUNOS ---
COL_STATUS = 'statusPreenchimento'
COL_CURSO = 'curso'
COL_ORIENTADOR = 'nome-orientador'
COL_TURMA = 'turma-fase'
COL_NOME = 'nome-completo'
COL_MATRICULA = 'matricula'
COL_CPF = 'cpf'
COL_ID = 'idRegistro'

STATUS_CONCLUIDO = 'CONCLUÍDO'
STATUS_ALUNO = 'ALUNO'

_NAO_DIGITOS = re.compile(r'\D')


def _so_digitos(texto):
    return _NAO_DIGITOS.sub('', texto or '')


def _igual(campo):
    def predicado(registro, valor):
        return registro.get(campo) == valor
    return predicado


def _nome_contem(registro, valor):
    nome = registro.get(COL_NOME)
    return bool(nome) and valor.lower() in nome.lower()


def _matricula_do_ano(registro, valor):
    matricula = registro.get(COL_MATRICULA)
    return bool(matricula) and matricula.startswith(valor)


def _cpf_contem(registro, valor):
    cpf = registro.get(COL_CPF)
    return bool(cpf) and valor in _so_digitos(cpf)


# chave do corpo da requisição -> (predicado, normalização do critério)
PREDICADOS = {
    'status': (_igual(COL_STATUS), None),
    'curso': (_igual(COL_CURSO), None),
    'orientador': (_igual(COL_ORIENTADOR), None),
    'turma': (_igual(COL_TURMA), None),
    'nome': (_nome_contem, None),
    'ano': (_matricula_do_ano, None),
    'cpf': (_cpf_contem, _so_digitos),
}


def criterios_ativos(criterios):
    ativos = []
    for chave, (predicado, normalizar) in PREDICADOS.items():
        valor = (criterios or {}).get(chave)
        # false, 0, '' e null contam como filtro não informado
        if not valor:
            continue
        valor = str(valor)
        if normalizar:
            valor = normalizar(valor)
        if valor == '':
            continue
        ativos.append((predicado, valor))
    return ativos


def aplicar_filtros(registros, criterios):
    ativos = criterios_ativos(criterios)
    return [r for r in registros if all(p(r, v) for p, v in ativos)]


# --- ESTATÍSTICAS E OPÇÕES DOS SELECTS ---

def _status_normalizado(registro):
    return (registro.get(COL_STATUS) or '').strip().upper()


def calcular_estatisticas(registros):
    status = [_status_normalizado(r) for r in registros]
    return {
        'total': len(registros),
        'completos': status.count(STATUS_CONCLUIDO),
        'pendentes': status.count(STATUS_ALUNO),
    }


def valores_distintos(registros, coluna):
    return sorted({r[coluna] for r in registros if r.get(coluna)})


def anos_matricula(registros):
    anos = {r[COL_MATRICULA][:4] for r in registros if r.get(COL_MATRICULA)}
    # Numéricos primeiro, do mais recente para o mais antigo; o resto vai para o fim.
    numericos = sorted((a for a in anos if a.isdigit()), key=int, reverse=True)
    outros = sorted(a for a in anos if not a.isdigit())
    return numericos + outros


def opcoes_filtro(registros):
    return {
        'cursos': valores_distintos(registros, COL_CURSO),
        'orientadores': valores_distintos(registros, COL_ORIENTADOR),
        'turmas': valores_distintos(registros, COL_TURMA),
        'status': valores_distintos(registros, COL_STATUS),
        'anos': anos_matricula(registros),
    }
