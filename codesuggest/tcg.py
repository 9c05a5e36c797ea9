"""Translation of three-address intermediate code into accumulator instructions."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from os import PathLike

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\v\f\r"

_RELATIONAL = (
    ("==", "JZ"),
    ("!=", "JNZ"),
    (">=", "JGEZ"),
    ("<=", "JLEZ"),
    (">", "JGTZ"),
    ("<", "JLTZ"),
)

_ARITHMETIC = (
    ("+", "ADD"),
    ("-", "SUB"),
    ("*", "MUL"),
    ("/", "DIV"),
)


def _trim(line: str) -> str:
    return line.lstrip(" \t").rstrip("\n\r \t")


def _scan(text: str, fmt: str) -> list[str]:
    """Match ``text`` against a scanf-style format of ``%s`` fields and literals.

    Returns the fields converted before the first mismatch.
    """
    fields: list[str] = []
    pos = 0
    k = 0
    size = len(text)
    while k < len(fmt):
        ch = fmt[k]
        if ch in _WHITESPACE:
            while pos < size and text[pos] in _WHITESPACE:
                pos += 1
            k += 1
        elif fmt.startswith("%s", k):
            while pos < size and text[pos] in _WHITESPACE:
                pos += 1
            start = pos
            while pos < size and text[pos] not in _WHITESPACE:
                pos += 1
            if pos == start:
                break
            fields.append(text[start:pos])
            k += 2
        elif pos < size and text[pos] == ch:
            pos += 1
            k += 1
        else:
            break
    return fields


def _relational(lhs: str, op1: str, op2: str, jump: str) -> list[str]:
    return [
        f"LOAD {op1}",
        f"SUB {op2}",
        f"{jump} SET1_{lhs}",
        "LOAD 0",
        f"STORE {lhs}",
        f"JMP ENDSET_{lhs}",
        f"SET1_{lhs}:",
        "LOAD 1",
        f"STORE {lhs}",
        f"ENDSET_{lhs}:",
    ]


def translate_line(line: str) -> list[str] | None:
    """Translate one IR line into target instructions.

    Returns an empty list for blank lines, comments and recognised lines that
    do not parse, and None for lines that are not recognised at all.
    """
    line = _trim(line)
    if not line or line.startswith("#"):
        return []

    for op, jump in _RELATIONAL:
        if op in line:
            fields = _scan(line, f"%s = %s {op} %s")
            return _relational(*fields, jump) if len(fields) == 3 else []

    if "=" in line:
        for op, mnemonic in _ARITHMETIC:
            if op in line:
                fields = _scan(line, f"%s = %s {op} %s")
                if len(fields) != 3:
                    return []
                lhs, op1, op2 = fields
                return [f"LOAD {op1}", f"{mnemonic} {op2}", f"STORE {lhs}"]
        fields = _scan(line, "%s = %s")
        if len(fields) != 2:
            return []
        lhs, op1 = fields
        return [f"LOAD {op1}", f"STORE {lhs}"]

    if line.startswith("if"):
        fields = _scan(line, "if %s goto %s")
        return [f"LOAD {fields[0]}", f"JNZ {fields[1]}"] if len(fields) == 2 else []
    if line.startswith("goto"):
        fields = _scan(line, "goto %s")
        return [f"JMP {fields[0]}"] if fields else []
    if line.startswith("return"):
        fields = _scan(line, "return %s")
        return [f"LOAD {fields[0]}", "OUT"] if fields else []
    if line.startswith("L"):
        return [f"{line}:"]
    return None


def generate_target_code(ir_lines: Iterable[str] | str) -> list[str]:
    """Translate IR lines into a list of target instructions."""
    if isinstance(ir_lines, str):
        ir_lines = ir_lines.splitlines()
    output: list[str] = []
    for raw in ir_lines:
        translated = translate_line(raw)
        if translated is None:
            logger.warning("Skipped unrecognized line: %s", _trim(raw))
            continue
        output.extend(translated)
    return output


def generate_target_file(
    ir_path: str | PathLike[str], target_path: str | PathLike[str]
) -> list[str]:
    """Translate the IR file at ``ir_path`` and write the result to ``target_path``."""
    with open(ir_path, encoding="utf-8") as source:
        code = generate_target_code(source)
    with open(target_path, "w", encoding="utf-8") as target:
        target.writelines(f"{instruction}\n" for instruction in code)
    return code