import logging

import pytest

from codesuggest.tcg import generate_target_code, generate_target_file, translate_line


@pytest.mark.parametrize(
    "op, mnemonic",
    [("+", "ADD"), ("-", "SUB"), ("*", "MUL"), ("/", "DIV")],
)
def test_arithmetic(op, mnemonic):
    assert translate_line(f"t0 = a {op} b\n") == ["LOAD a", f"{mnemonic} b", "STORE t0"]


def test_copy():
    assert translate_line("x = t0") == ["LOAD t0", "STORE x"]


@pytest.mark.parametrize(
    "op, jump",
    [
        ("==", "JZ"),
        ("!=", "JNZ"),
        (">=", "JGEZ"),
        ("<=", "JLEZ"),
        (">", "JGTZ"),
        ("<", "JLTZ"),
    ],
)
def test_relational(op, jump):
    result = translate_line(f"t1 = a {op} b")
    assert len(result) == 10
    assert result[:3] == ["LOAD a", "SUB b", f"{jump} SET1_t1"]
    assert result[-1] == "ENDSET_t1:"
    assert result.count("STORE t1") == 2


def test_unparsable_relational_produces_nothing():
    assert translate_line("t0 = a==b") == []


def test_conditional_jump():
    assert translate_line("if t0 goto L0") == ["LOAD t0", "JNZ L0"]


def test_goto():
    assert translate_line("goto L2") == ["JMP L2"]


def test_return():
    assert translate_line("return 0") == ["LOAD 0", "OUT"]


def test_label_line_gets_colon_appended():
    assert translate_line("L0:") == ["L0::"]


@pytest.mark.parametrize("line", ["", "\n", "   \t\n", "# comment"])
def test_blank_and_comment_lines(line):
    assert translate_line(line) == []


def test_unrecognized_line():
    assert translate_line("nonsense") is None


def test_generate_target_code_skips_and_logs(caplog):
    lines = ["t0 = a + b\n", "bogus\n", "goto L1\n"]
    with caplog.at_level(logging.WARNING, logger="codesuggest.tcg"):
        code = generate_target_code(lines)
    assert code == ["LOAD a", "ADD b", "STORE t0", "JMP L1"]
    assert "Skipped unrecognized line: bogus" in caplog.messages


def test_generate_target_code_accepts_text():
    text = "x = 1\nreturn x\n"
    assert generate_target_code(text) == generate_target_code(text.splitlines())
    assert generate_target_code(text)[-1] == "OUT"


def test_generate_target_file_round_trip(tmp_path):
    ir_path = tmp_path / "ir.txt"
    target_path = tmp_path / "targetCode.txt"
    ir_path.write_text("a = 5\nt0 = a * 2\nreturn t0\n", encoding="utf-8")
    code = generate_target_file(ir_path, target_path)
    assert target_path.read_text(encoding="utf-8").splitlines() == code
    assert code == generate_target_code(ir_path.read_text(encoding="utf-8"))


def test_generate_target_file_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        generate_target_file(tmp_path / "missing.txt", tmp_path / "out.txt")
    assert not (tmp_path / "out.txt").exists()