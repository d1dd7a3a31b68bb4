"""Reads a class of students and reports who passed by grade and attendance."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TextIO

ROWS = 3
COLS = 10
STUDENT_COUNT = ROWS * COLS
PASSING_GRADE = 6
PASSING_FREQUENCY = 75

VERSION_MENU = "Escolha a versão:\n1 - Matriz\n2 - Lista Encadeada\nOpção: "


class Status(str, Enum):
    """Outcome for one student."""

    APPROVED = "Aprovado"
    FAILED_BOTH = "Reprovado por nota e por falta"
    FAILED_GRADE = "Reprovado por nota"
    FAILED_ATTENDANCE = "Reprovado por falta"


def classify(nota: float, frequencia: float) -> Status:
    """Decide the outcome from a grade (0-10) and an attendance percentage."""
    good_grade = nota >= PASSING_GRADE
    good_attendance = frequencia >= PASSING_FREQUENCY
    if good_grade and good_attendance:
        return Status.APPROVED
    if not good_grade and not good_attendance:
        return Status.FAILED_BOTH
    if not good_grade:
        return Status.FAILED_GRADE
    return Status.FAILED_ATTENDANCE


@dataclass
class Record:
    """One student's name, matricula, grade and attendance."""

    nome: str
    matricula: str
    nota: float
    frequencia: float

    @property
    def status(self) -> Status:
        return classify(self.nota, self.frequencia)


def _next_token(tokens) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended before all students were read") from None


def _read_bounded(tokens, out: TextIO, prompt: str, low: float, high: float) -> float:
    while True:
        out.write(prompt)
        try:
            value = float(_next_token(tokens))
        except ValueError:
            continue
        if low <= value <= high:
            return value


def read_records(
    tokens: Iterable[str],
    count: int = STUDENT_COUNT,
    out: TextIO | None = None,
    frequency_label: str = "Presença",
) -> list[Record]:
    """Read `count` students from whitespace tokens, prompting on `out`.

    Grades outside 0-10 and attendance outside 0-100 are asked for again.
    Raises EOFError if the tokens run out.
    """
    out = sys.stdout if out is None else out
    tokens = iter(tokens)
    records = []
    for number in range(1, count + 1):
        out.write(f"\nAluno {number}:\n")
        out.write("Nome: ")
        nome = _next_token(tokens)
        out.write("Matrícula: ")
        matricula = _next_token(tokens)
        nota = _read_bounded(tokens, out, "Nota: ", 0, 10)
        frequencia = _read_bounded(tokens, out, f"{frequency_label} (em %): ", 0, 100)
        records.append(Record(nome, matricula, nota, frequencia))
    return records


def report(records: Iterable[Record]) -> str:
    """Return the outcome line for every student, numbered from 1."""
    return "".join(
        f"\nAluno {number}: {record.nome} - {record.status.value}\n"
        for number, record in enumerate(records, start=1)
    )


def _to_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Read the students from standard input and print their outcomes."""
    parser = argparse.ArgumentParser(
        prog="turma-review", description="Report pass or fail for a class of students."
    )
    parser.add_argument(
        "--mode",
        choices=("matriz", "lista"),
        help="skip the version menu and use this layout",
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    tokens = iter(sys.stdin.read().split())

    mode = args.mode
    if mode is None:
        out.write(VERSION_MENU)
        mode = {1: "matriz", 2: "lista"}.get(_to_int(next(tokens, None)))
        if mode is None:
            out.write("Opção inválida\n")
            return 0

    if mode == "matriz":
        out.write("Digite os dados dos alunos:\n")
        label = "Frequência"
    else:
        out.write("Digite os dados dos alunos:")
        label = "Presença"

    try:
        records = read_records(tokens, STUDENT_COUNT, out, label)
    except EOFError:
        out.write("\n")
        return 1
    out.write(report(records))
    return 0


if __name__ == "__main__":
    sys.exit(main())