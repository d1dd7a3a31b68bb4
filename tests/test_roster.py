import io

import pytest

from turma.roster import MENU, Roster, Student, run


def _matriculas(roster):
    return [student.matricula for student in roster]


def test_insert_keeps_ascending_order():
    roster = Roster()
    roster.insert("C", 30)
    roster.insert("A", 10)
    roster.insert("B", 20)
    assert _matriculas(roster) == [10, 20, 30]
    assert [s.name for s in roster] == ["A", "B", "C"]
    assert len(roster) == 3


def test_insert_returns_student():
    roster = Roster()
    student = roster.insert("Ana", 7)
    assert student == Student("Ana", 7)
    assert list(roster) == [student]


def test_remove_returns_removed_student():
    roster = Roster()
    roster.insert("A", 1)
    roster.insert("B", 2)
    removed = roster.remove(1)
    assert removed == Student("A", 1)
    assert _matriculas(roster) == [2]


def test_remove_missing_raises_key_error():
    roster = Roster()
    roster.insert("A", 1)
    with pytest.raises(KeyError):
        roster.remove(2)
    assert len(roster) == 1


def test_update_changes_in_place_without_reordering():
    roster = Roster()
    roster.insert("A", 10)
    roster.insert("B", 20)
    roster.update(10, "X", 99)
    assert list(roster) == [Student("X", 99), Student("B", 20)]


def test_insert_after_update_stops_at_first_not_smaller():
    roster = Roster()
    roster.insert("A", 10)
    roster.insert("B", 20)
    roster.update(10, "X", 99)
    roster.insert("N", 50)
    assert _matriculas(roster) == [50, 99, 20]


def test_update_missing_raises_key_error():
    roster = Roster()
    with pytest.raises(KeyError):
        roster.update(5, "X", 6)


def test_format_lists_students():
    roster = Roster()
    roster.insert("Ana", 1)
    assert roster.format() == "( Nome: Ana | Matrícula: 1 )\n"


def test_format_empty_roster():
    assert Roster().format() == ""


def test_run_inserts_names_with_spaces_and_prints():
    stdin = io.StringIO("1\nAna Silva\n5\n1\nBruno\n3\n4\n0\n")
    stdout = io.StringIO()
    roster = run(stdin, stdout)
    assert [s.name for s in roster] == ["Bruno", "Ana Silva"]
    output = stdout.getvalue()
    assert "( Nome: Bruno | Matrícula: 3 )\n( Nome: Ana Silva | Matrícula: 5 )\n" in output
    assert output.startswith(MENU)


def test_run_invalid_option_message():
    stdout = io.StringIO()
    run(io.StringIO("7\n0\n"), stdout)
    assert "Insira uma opção válida\n" in stdout.getvalue()
    assert stdout.getvalue().count(MENU) == 2


def test_run_remove_missing_is_silent():
    stdout = io.StringIO()
    roster = run(io.StringIO("2\n9\n0\n"), stdout)
    assert len(roster) == 0
    assert stdout.getvalue().count(MENU) == 2


def test_run_update_and_remove():
    stdin = io.StringIO("1\nAna\n1\n1\nBia\n2\n3\n1 Carla 8\n2\n2\n0\n")
    roster = run(stdin, io.StringIO())
    assert list(roster) == [Student("Carla", 8)]


def test_run_stops_at_end_of_input():
    stdout = io.StringIO()
    roster = run(io.StringIO("1\nAna\n4\n"), stdout)
    assert list(roster) == [Student("Ana", 4)]
    assert stdout.getvalue().count(MENU) == 2


def test_run_uses_given_roster():
    roster = Roster()
    roster.insert("Pré", 2)
    result = run(io.StringIO("4\n0\n"), io.StringIO())
    assert len(result) == 0
    same = run(io.StringIO("0\n"), io.StringIO(), roster)
    assert same is roster
    assert len(same) == 1