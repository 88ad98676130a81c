from estagios.atualizacao import Escrita, corpo_batch_update, montar_lote, montar_lote_dinamico, montar_lote_notas

from conftest import CABECALHO_ALUNOS


def test_montar_lote_uma_celula_por_coluna():
    lote = montar_lote("Página1", 7, {0: "x", 26: "y"})
    assert lote == [Escrita("'Página1'!A7", "x"), Escrita("'Página1'!AA7", "y")]


def test_montar_lote_notas():
    colunas = {"Nota Supervisor": 8, "Nota Relatório": 9, "Nota da Defesa": 10, "Média": 11, "Observações": 12}
    lote = montar_lote_notas("Página1", colunas, 3, ("8,5", "9", ""), "8,75", "ok")
    assert lote == [
        Escrita("'Página1'!I3", "8,5"),
        Escrita("'Página1'!J3", "9"),
        Escrita("'Página1'!K3", ""),
        Escrita("'Página1'!L3", "8,75"),
        Escrita("'Página1'!M3", "ok"),
    ]


def test_lote_dinamico_ignora_campos_desconhecidos_e_fecha_com_status():
    campos = {"idRegistro": "R2", "empresa": "ACME", "campoInexistente": "x", "supervisor": "Carlos"}
    lote = montar_lote_dinamico("Página1", CABECALHO_ALUNOS, 3, campos)
    assert lote == [
        Escrita("'Página1'!N3", "ACME"),
        Escrita("'Página1'!O3", "Carlos"),
        Escrita("'Página1'!H3", "CONCLUÍDO"),
    ]


def test_lote_dinamico_sem_coluna_de_status():
    lote = montar_lote_dinamico("Aba", ["idRegistro", "empresa"], 2, {"empresa": 42, "outro": None})
    assert lote == [Escrita("'Aba'!B2", "42")]


def test_corpo_batch_update():
    corpo = corpo_batch_update([Escrita("'Aba'!B2", "42"), Escrita("'Aba'!C2", "")])
    assert corpo == {
        "valueInputOption": "USER_ENTERED",
        "data": [
            {"range": "'Aba'!B2", "values": [["42"]]},
            {"range": "'Aba'!C2", "values": [[""]]},
        ],
    }


def test_lote_dinamico_booleanos_e_valores_compostos():
    campos = {"empresa": True, "supervisor": {"nome": "x"}, "curso": ["a"], "turma-fase": False}
    lote = montar_lote_dinamico("Aba", CABECALHO_ALUNOS, 2, campos)
    assert lote == [
        Escrita("'Aba'!N2", "TRUE"),
        Escrita("'Aba'!F2", "FALSE"),
        Escrita("'Aba'!H2", "CONCLUÍDO"),
    ]


def test_corpo_batch_update_literal():
    corpo = corpo_batch_update([Escrita("'Aba'!B2", "=1+1")], "RAW")
    assert corpo["valueInputOption"] == "RAW"
