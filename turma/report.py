"""Reads students with two grades each and prints a table of their results."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import TextIO

from turma.review import Status, classify

GRADE_COUNT = 2
SEPARATOR = (
    "--------------------------------------------------------------------------------"
    "------------------------------------"
)


@dataclass
class GradedStudent:
    """A student with two grades and an attendance percentage."""

    nome: str
    matricula: str
    notas: tuple[float, float]
    frequencia: float

    def average(self) -> float:
        """Return the mean of the two grades."""
        return (self.notas[0] + self.notas[1]) / 2.0

    def status(self) -> Status:
        """Return the outcome from the average grade and the attendance."""
        return classify(self.average(), self.frequencia)


class _Input:
    """Reads integers, words and lines from a text buffer."""

    _INT = re.compile(r"\s*([+-]?\d+)")
    _WORD = re.compile(r"\s*(\S+)")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def integer(self) -> int:
        match = self._INT.match(self._text, self._pos)
        if match is None:
            raise ValueError("expected the number of students")
        self._pos = match.end()
        return int(match.group(1))

    def word(self) -> str:
        match = self._WORD.match(self._text, self._pos)
        if match is None:
            raise EOFError("input ended before all students were read")
        self._pos = match.end()
        return match.group(1)

    def skip_char(self) -> None:
        if self._pos < len(self._text):
            self._pos += 1

    def skip_line(self) -> None:
        end = self._text.find("\n", self._pos)
        if end == -1:
            raise EOFError("input ended before all students were read")
        self._pos = end + 1

    def line(self) -> str:
        if self._pos >= len(self._text):
            raise EOFError("input ended before all students were read")
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        result = self._text[self._pos:end]
        self._pos = min(end + 1, len(self._text))
        return result

    def bounded(self, out: TextIO, prompt: str, low: float, high: float) -> float:
        while True:
            out.write(prompt)
            try:
                value = float(self.word())
            except ValueError:
                continue
            if low <= value <= high:
                return value


def read_students(stdin: TextIO, stdout: TextIO) -> list[GradedStudent]:
    """Ask how many students there are, then read each one, prompting on stdout.

    Names take a whole line; grades outside 0-10 and attendance outside
    0-100 are asked for again. Raises ValueError if the count is not a
    number and EOFError if the input runs out.
    """
    source = _Input(stdin.read())
    stdout.write("Digite quantos alunos serão adicionados à lista: ")
    count = source.integer()
    source.skip_char()
    stdout.write("Digite os dados dos alunos:")

    students = []
    for number in range(1, count + 1):
        stdout.write(f"\nAluno {number}:\n")
        stdout.write("Nome: ")
        if number != 1:
            source.skip_line()
        nome = source.line()
        stdout.write("Matrícula: ")
        matricula = source.word()
        notas = tuple(
            source.bounded(stdout, f"Nota {index}: ", 0, 10)
            for index in range(1, GRADE_COUNT + 1)
        )
        frequencia = source.bounded(stdout, "Presença (em %): ", 0, 100)
        students.append(GradedStudent(nome, matricula, notas, frequencia))
    return students


def format_table(students: list[GradedStudent]) -> str:
    """Return the results table: a header, a rule and one row per student."""
    header = (
        f"\n{'Seq':<7} | {'Nome':<25} | {'Nota 1':<6} | {'Nota 2':<6} | "
        f"{'Média Final':<13} | {'Frequência':<10} | {'Situação':<25}\n"
    )
    rows = (
        f"{number:<7d} | {student.nome:<25} | {student.notas[0]:6.1f} | "
        f"{student.notas[1]:6.1f} | {student.average():12.1f} | "
        f"{student.frequencia:9.1f}% | {student.status().value:<25}\n"
        for number, student in enumerate(students, start=1)
    )
    return header + SEPARATOR + "\n" + "".join(rows)


def main(argv: list[str] | None = None) -> int:
    """Read the students from standard input and print their results table."""
    out = sys.stdout
    try:
        students = read_students(sys.stdin, out)
    except (ValueError, EOFError):
        out.write("\n")
        return 1
    out.write(format_table(students))
    return 0


if __name__ == "__main__":
    sys.exit(main())