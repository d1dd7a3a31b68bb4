"""Student roster kept ordered by matricula, with an interactive text menu."""

from __future__ import annotations

import re
import sys
from contextlib import suppress
from dataclasses import dataclass
from typing import Iterator, TextIO

MENU = (
    "Escolha uma opção:\n"
    "[ 0 ] - Sair\n"
    "[ 1 ] - Adicionar estudante\n"
    "[ 2 ] - Remover estudante\n"
    "[ 3 ] - Atualizar dados de um estudante\n"
    "[ 4 ] - Mostrar lista de estudante\n"
)
INVALID_OPTION = "Insira uma opção válida\n"


@dataclass
class Student:
    """A student identified by an integer matricula."""

    name: str
    matricula: int


class Roster:
    """Students kept in ascending matricula order as they are inserted.

    Updating a student changes it in place without moving it, so the order
    only holds for students whose matricula was never changed.
    """

    def __init__(self) -> None:
        self._students: list[Student] = []

    def insert(self, name: str, matricula: int) -> Student:
        """Insert a student before the first one whose matricula is not smaller."""
        student = Student(name, matricula)
        position = next(
            (i for i, current in enumerate(self._students) if current.matricula >= matricula),
            len(self._students),
        )
        self._students.insert(position, student)
        return student

    def _find(self, matricula: int) -> int:
        for position, student in enumerate(self._students):
            if student.matricula == matricula:
                return position
        raise KeyError(matricula)

    def remove(self, matricula: int) -> Student:
        """Remove and return the first student with this matricula."""
        return self._students.pop(self._find(matricula))

    def update(self, matricula: int, new_name: str, new_matricula: int) -> Student:
        """Rename and renumber the first student with this matricula, in place."""
        student = self._students[self._find(matricula)]
        student.name = new_name
        student.matricula = new_matricula
        return student

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def format(self) -> str:
        """Return one line per student, in roster order."""
        return "".join(
            f"( Nome: {student.name} | Matrícula: {student.matricula} )\n" for student in self
        )


class _Scanner:
    """Reads integers, words, single characters and lines from a text buffer."""

    _INT = re.compile(r"\s*([+-]?\d+)")
    _WORD = re.compile(r"\s*(\S+)")
    _BLANK = re.compile(r"\s*\Z")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def at_end(self) -> bool:
        return self._BLANK.match(self._text, self._pos) is not None

    def integer(self) -> int | None:
        match = self._INT.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group(1))

    def word(self) -> str | None:
        match = self._WORD.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group(1)

    def char(self) -> None:
        if self._pos < len(self._text):
            self._pos += 1

    def line(self) -> str:
        end = self._text.find("\n", self._pos)
        if end == -1:
            end = len(self._text)
        result = self._text[self._pos:end]
        self._pos = min(end + 1, len(self._text))
        return result


def _dispatch(option: int, scanner: _Scanner, stdout: TextIO, roster: Roster) -> bool:
    """Carry out one menu option; return False when the input ran out."""
    if option == 1:
        stdout.write("Insira os dados do aluno:\n")
        stdout.write("Nome: ")
        scanner.char()
        name = scanner.line()
        stdout.write("Matrícula: ")
        matricula = scanner.integer()
        if matricula is None:
            return False
        stdout.write("\n")
        roster.insert(name, matricula)
    elif option == 2:
        stdout.write("Insira a matrícula do aluno a ser removido: ")
        matricula = scanner.integer()
        if matricula is None:
            return False
        stdout.write("\n")
        with suppress(KeyError):
            roster.remove(matricula)
    elif option == 3:
        stdout.write("Insira a matrícula atual do estudante a ser modificado: ")
        matricula = scanner.integer()
        stdout.write("Insira o nome atualizado: ")
        new_name = scanner.word()
        stdout.write("Insira a matrícula atualizada: ")
        new_matricula = scanner.integer()
        if matricula is None or new_name is None or new_matricula is None:
            return False
        stdout.write("\n")
        with suppress(KeyError):
            roster.update(matricula, new_name, new_matricula)
    elif option == 4:
        stdout.write(roster.format())
        stdout.write("\n")
    else:
        stdout.write(INVALID_OPTION)
    return True


def run(stdin: TextIO, stdout: TextIO, roster: Roster | None = None) -> Roster:
    """Run the menu loop until option 0 or the end of input; return the roster."""
    roster = Roster() if roster is None else roster
    scanner = _Scanner(stdin.read())
    while True:
        stdout.write(MENU)
        option = scanner.integer()
        if option is None:
            if scanner.at_end():
                break
            scanner.word()
            stdout.write("\n")
            stdout.write(INVALID_OPTION)
            continue
        stdout.write("\n")
        if option == 0:
            break
        if not _dispatch(option, scanner, stdout, roster):
            break
    return roster


def main(argv: list[str] | None = None) -> int:
    """Start the interactive roster on standard input and output."""
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())