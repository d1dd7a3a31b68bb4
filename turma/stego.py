"""Hides a short word in the low bits of a file's early bytes and reads it back."""

from __future__ import annotations

import sys
from pathlib import Path

SECURE_START = 33
SECURE_END = 120
MAX_TEXT_LENGTH = 10
TAG = "$"
_TAG_BYTE = ord(TAG)


class StegoError(ValueError):
    """Raised when a text cannot be hidden."""


def tag_text(text: str) -> str:
    """Wrap the text in the start and end markers."""
    return f"{TAG}{text}{TAG}"


def text_to_bits(text: str | bytes) -> list[int]:
    """Return the bits of every byte of the text, most significant first."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def embed(data: bytes, text: str) -> bytes:
    """Return a copy of data with the tagged text in the low bits of bytes 33-120.

    Bits that do not fit in that region are dropped.
    """
    if len(text.encode("utf-8")) > MAX_TEXT_LENGTH:
        raise StegoError(f"text longer than {MAX_TEXT_LENGTH} bytes")
    bits = text_to_bits(tag_text(text))
    result = bytearray(data)
    positions = range(SECURE_START, min(SECURE_END + 1, len(result)))
    for position, bit in zip(positions, bits):
        result[position] = (result[position] & 0b11111110) | bit
    return bytes(result)


def extract(data: bytes) -> str | None:
    """Return the text hidden in data, or None if there is none."""
    collected = bytearray()
    found_start = False
    current = 0
    bit_count = 0
    for byte in data[SECURE_START:SECURE_END + 1]:
        current = ((current << 1) | (byte & 1)) & 0xFF
        bit_count += 1
        if bit_count < 8:
            continue
        if current == _TAG_BYTE and not found_start:
            found_start = True
        elif found_start:
            if current == _TAG_BYTE:
                break
            if len(collected) < MAX_TEXT_LENGTH:
                collected.append(current)
        current = 0
        bit_count = 0
    if found_start and collected:
        return collected.decode("utf-8", errors="replace")
    return None


def hide(original_path: str | Path, output_path: str | Path, text: str) -> None:
    """Write a copy of the original file with the text hidden in it."""
    if len(text.encode("utf-8")) > MAX_TEXT_LENGTH:
        raise StegoError(f"text longer than {MAX_TEXT_LENGTH} bytes")
    data = Path(original_path).read_bytes()
    Path(output_path).write_bytes(embed(data, text))


def reveal(path: str | Path) -> str | None:
    """Return the text hidden in a file, or None if there is none."""
    return extract(Path(path).read_bytes())


def _usage(prog: str) -> str:
    return (
        "Modos de uso:\n"
        f"Esteganografar: {prog} -e <imagem_entrada.jpg> <imagem_saida.jpg> <texto>\n"
        f"Desesteganografar: {prog} -d <imagem_esteganografada.jpg>\n"
    )


def main(argv: list[str] | None = None) -> int:
    """Hide (-e input output text) or reveal (-d file) a word in a file."""
    args = sys.argv[1:] if argv is None else list(argv)
    prog = "turma-stego"
    out = sys.stdout
    if len(args) not in (2, 4):
        out.write(_usage(prog))
        return 1

    flag = args[0]
    if flag == "-e":
        if len(args) != 4:
            out.write(_usage(prog))
            return 1
        original, output, text = args[1:]
        try:
            hide(original, output, text)
        except StegoError:
            out.write("Só é possível inserir uma plavra de até 10 caracteres\n")
        except OSError:
            out.write("Falha ao abrir arquivos\n")
    elif flag == "-d":
        try:
            text = reveal(args[1])
        except OSError:
            out.write("Erro ao abrir arquivo\n")
            return 0
        if text is None:
            out.write("Nenhum texto oculto encontrado ou formato inválido!\n")
        else:
            out.write(f"Texto extraído: {text}\n")
    else:
        out.write("Flag inválida\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())