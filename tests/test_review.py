import io

import pytest

from turma.review import (
    STUDENT_COUNT,
    Record,
    Status,
    classify,
    main,
    read_records,
    report,
)


@pytest.mark.parametrize(
    "nota, frequencia, expected",
    [
        (6, 75, Status.APPROVED),
        (10, 100, Status.APPROVED),
        (5.9, 74, Status.FAILED_BOTH),
        (5, 80, Status.FAILED_GRADE),
        (7, 10, Status.FAILED_ATTENDANCE),
    ],
)
def test_classify(nota, frequencia, expected):
    assert classify(nota, frequencia) is expected


def test_status_messages():
    assert Status.APPROVED.value == "Aprovado"
    assert classify(0, 0).value == "Reprovado por nota e por falta"


def test_record_status_follows_classify():
    record = Record("Ana", "123", 8.0, 50.0)
    assert record.status is Status.FAILED_ATTENDANCE


def test_read_records_reprompts_out_of_range():
    out = io.StringIO()
    records = read_records(["Ana", "123", "11", "8", "101", "90"], 1, out, "Presença")
    assert records == [Record("Ana", "123", 8.0, 90.0)]
    text = out.getvalue()
    assert text.count("Nota: ") == 2
    assert text.count("Presença (em %): ") == 2
    assert text.startswith("\nAluno 1:\nNome: Matrícula: ")


def test_read_records_skips_non_numeric_grade():
    out = io.StringIO()
    records = read_records(["Bia", "9", "abc", "6", "75"], 1, out, "Frequência")
    assert records[0].nota == 6.0
    assert out.getvalue().count("Nota: ") == 2
    assert "Frequência (em %): " in out.getvalue()


def test_read_records_raises_on_missing_input():
    with pytest.raises(EOFError):
        read_records(["Ana", "123", "8"], 1, io.StringIO(), "Presença")


def test_read_records_reads_in_order():
    tokens = "A 1 7 80 B 2 3 90".split()
    records = read_records(tokens, 2, io.StringIO(), "Presença")
    assert [r.nome for r in records] == ["A", "B"]
    assert [r.status for r in records] == [Status.APPROVED, Status.FAILED_GRADE]


def test_report_lines():
    records = [Record("Ana", "1", 8, 90), Record("Bia", "2", 5, 50)]
    text = report(records)
    assert text == (
        "\nAluno 1: Ana - Aprovado\n"
        "\nAluno 2: Bia - Reprovado por nota e por falta\n"
    )


def test_report_empty():
    assert report([]) == ""


def _class_input():
    return " ".join(f"A{i} {i} 7 80" for i in range(STUDENT_COUNT))


def test_main_list_mode(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_class_input()))
    assert main(["--mode", "lista"]) == 0
    out = capsys.readouterr().out
    assert out.count(" - Aprovado\n") == STUDENT_COUNT
    assert "Presença (em %): " in out


def test_main_menu_matrix(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 " + _class_input()))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Escolha a versão:\n1 - Matriz\n2 - Lista Encadeada\nOpção: ")
    assert "Digite os dados dos alunos:\n" in out
    assert "Frequência (em %): " in out
    assert f"\nAluno {STUDENT_COUNT}: A{STUDENT_COUNT - 1} - Aprovado\n" in out


def test_main_invalid_option(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Opção inválida\n")


def test_main_short_input_fails(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Ana 1 7 80"))
    assert main(["--mode", "lista"]) == 1
    assert "Aprovado" not in capsys.readouterr().out