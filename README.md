# turma

Small classroom tools for keeping track of students. Each one is an
interactive console program reading standard input, with a Python API behind
it. Prompts and messages are in Portuguese.

## Installation

    pip install .

To run the tests:

    pip install .[test]
    pytest

## `turma-roster`

An interactive menu over a roster of students:

    [ 0 ] - Sair
    [ 1 ] - Adicionar estudante
    [ 2 ] - Remover estudante
    [ 3 ] - Atualizar dados de um estudante
    [ 4 ] - Mostrar lista de estudante

The menu loop stops at option 0 or at the end of input. Removing or updating
a matrícula that is not in the roster does nothing.

From Python, `turma.roster.Roster` holds `Student` objects (`name`,
`matricula`). `insert` places a student before the first one whose matrícula
is not smaller; `update` changes a student in place without moving it;
`remove` and `update` raise `KeyError` when the matrícula is not found.

```python
from turma.roster import Roster

roster = Roster()
roster.insert("Ana", 20)
roster.insert("Bruno", 10)
roster.update(10, "Bruna", 15)
roster.remove(20)
print(roster.format())   # ( Nome: Bruna | Matrícula: 15 )
```

`turma.roster.run(stdin, stdout, roster=None)` drives the same menu over any
pair of text streams and returns the roster.

## `turma-review`

Reads name, matrícula, grade (0–10) and attendance (0–100 %) for 30 students
and prints, for each, "Aprovado", "Reprovado por nota", "Reprovado por falta"
or "Reprovado por nota e por falta". A student passes with a grade of at least
6 and attendance of at least 75 %. Out-of-range values are asked for again.

It first asks which layout to use (1 - Matriz, 2 - Lista Encadeada); pass
`--mode matriz` or `--mode lista` to skip that question. Input is read as
whitespace-separated words, so each name is a single word. If the input runs
out before all 30 students are read, the command exits with status 1.

```python
from turma.review import Record, classify, report

classify(7.0, 80.0)   # Status.APPROVED
classify(5.0, 60.0)   # Status.FAILED_BOTH
print(report([Record("Ana", "001", 7.0, 80.0)]))
```

`turma.review.read_records(tokens, count=30, out=None, frequency_label="Presença")`
reads records from an iterable of words and raises `EOFError` if it runs out.

## `turma-report`

Asks how many students to enter, then reads for each a name (a whole line),
a matrícula, two grades and attendance, and prints a table with the final
average (mean of the two grades) and the resulting status. It exits with
status 1 if the count is not a number or the input ends early.

From Python, `turma.report.read_students(stdin, stdout)` returns a list of
`GradedStudent` objects, whose `average()` and `status()` give the mean grade
and the outcome, and `turma.report.format_table(students)` returns the table
as text.

## `turma-stego`

Hides a word of up to 10 bytes, wrapped between `$` markers, in the least
significant bits of bytes 33 to 120 of a file, and reads it back:

    turma-stego -e input.jpg output.jpg palavra
    turma-stego -d output.jpg

Bits that do not fit in that region are dropped. Any file works; the bytes
are changed without regard to its format.

From Python, `turma.stego.embed(data, text)` and `turma.stego.extract(data)`
work on bytes, and `turma.stego.hide(original_path, output_path, text)` and
`turma.stego.reveal(path)` on files. `extract` and `reveal` return `None` when
no hidden text is found. A word longer than 10 bytes raises
`turma.stego.StegoError`.

## What it does not do

The roster lives in memory only: nothing is saved between runs of
`turma-roster`, and the other commands do not keep their data either. The
text hider offers no encryption or protection of the hidden word.