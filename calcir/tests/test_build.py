import os

from calcir import build
from calcir.__main__ import main


def write_src(tmp_path, name, src_txt):
    path = tmp_path / name
    path.write_text(src_txt)
    return str(path)


def test_default_output_path():
    assert build.default_output_path("dir/prog.stm") == "dir/prog.ll"
    assert build.default_output_path("dir/prog.v1.stm") == "dir/prog.v1.ll"
    assert build.default_output_path("prog") == "prog.ll"


def test_module_id_for():
    assert build.module_id_for("some/dir/prog.stm") == "prog"


def test_compile_from_source_file(tmp_path):
    src = write_src(tmp_path, "prog.stm", "x=2+3*4\nx\n")
    out = build.compile_from_source_file(src)

    assert out == str(tmp_path / "prog.ll")
    ll = (tmp_path / "prog.ll").read_text()
    assert ll.startswith("; ModuleID = 'prog'\n")
    assert "  store i32 %2, i32* %x\n" in ll
    assert ll.endswith("  ret i32 0\n}\n")


def test_explicit_output_file_and_module_id(tmp_path):
    src = write_src(tmp_path, "prog.stm", "1")
    out = str(tmp_path / "nested" / "out.ll")
    build.compile_from_source_file(src, out, module_id="demo")

    assert (tmp_path / "nested" / "out.ll").read_text().startswith("; ModuleID = 'demo'\n")


def test_main_success(tmp_path, capsys):
    src = write_src(tmp_path, "ok.stm", "a=1\na")
    assert main([src]) == 0
    assert capsys.readouterr().out == ""
    assert os.path.exists(tmp_path / "ok.ll")


def test_main_output_flag(tmp_path):
    src = write_src(tmp_path, "ok.stm", "a=1\na")
    out = str(tmp_path / "other.ll")
    assert main([src, "-o", out, "--module-id", "m"]) == 0
    assert os.path.exists(out)
    assert not os.path.exists(tmp_path / "ok.ll")


def test_main_undefined_variable(tmp_path, capsys):
    src = write_src(tmp_path, "bad.stm", "x=1\nz=undeclared+1\n")
    assert main([src]) == 1
    assert capsys.readouterr().out == "Error: Line 2: undefined variable undeclared.\n"
    assert not os.path.exists(tmp_path / "bad.ll")


def test_main_missing_parenthesis(tmp_path, capsys):
    src = write_src(tmp_path, "bad.stm", "w=(1+2")
    assert main([src]) == 2
    assert capsys.readouterr().out == "Error: Line 1: right parenthesis is missing.\n"


def test_main_missing_operand(tmp_path, capsys):
    src = write_src(tmp_path, "bad.stm", "v=+5")
    assert main([src]) == 3
    assert capsys.readouterr().out == "Error: Line 1: missing variable near +.\n"


def test_main_missing_operator(tmp_path, capsys):
    src = write_src(tmp_path, "bad.stm", "2(3)")
    assert main([src]) == 4
    assert capsys.readouterr().out == "Error: Line 1: missing operator near 3.\n"


def test_main_invalid_assignment(tmp_path, capsys):
    src = write_src(tmp_path, "bad.stm", "a=b=c")
    assert main([src]) == 5
    assert capsys.readouterr().out == "Error: Line 1: invalid assignment a=b=c.\n"


def test_debug_logs_every_instruction_to_stderr(tmp_path, capsys):
    src = write_src(tmp_path, "prog.stm", "x=2+3*4\nx")
    assert main([src, "--debug"]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DEBUG" in captured.err
    assert "line 1: %x = alloca i32" in captured.err
    assert "line 1: %1 = mul i32 3, 4" in captured.err
    assert "line 2: %3 = load i32* %x" in captured.err
    assert f"Compiling {src}" in captured.err
    assert f"Wrote 6 instructions for variables [x] to {tmp_path / 'prog.ll'}" in captured.err


def test_info_level_without_debug_flag(tmp_path, capsys):
    src = write_src(tmp_path, "prog.stm", "x=1\ny=x")
    assert main([src]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DEBUG" not in captured.err
    assert "alloca" not in captured.err
    assert f"Wrote 5 instructions for variables [x, y] to {tmp_path / 'prog.ll'}" in captured.err
