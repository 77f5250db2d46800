import os
import re
from typing import List, Optional

from calcir import parsing
from calcir.ir import gen_ctx
from calcir.logger import LOG

# Only these end a statement. Other vertical whitespace (`\f`, `\v`, ...)
# stays inside a line and is stripped like any other whitespace.
LINE_BREAK = re.compile(r"\r\n|[\n\r\u2028\u2029\u0085]")


def default_output_path(source_file: str) -> str:
    return os.path.splitext(source_file)[0] + ".ll"


def module_id_for(source_file: str) -> str:
    return os.path.basename(os.path.splitext(source_file)[0])


def source_lines(src_txt: str) -> List[str]:
    lines = LINE_BREAK.split(src_txt)
    if lines[-1] == "":
        lines.pop()
    return lines


def compile_src(src_txt: str, module_id: str = gen_ctx.DEFAULT_MODULE_ID) -> gen_ctx.IrGenCtx:
    """
    Compiles a whole program, one statement per line. Stops at the first
    `errors.CompileError`, which is left to propagate.
    """
    ctx = gen_ctx.IrGenCtx(module_id)

    for lineno, line in enumerate(source_lines(src_txt), start=1):
        ctx.line = lineno
        stmt = parsing.parse_line(line, lineno)
        stmt.to_ir(ctx)

    return ctx


def compile_from_source_file(
        source_file: str,
        out_file: Optional[str] = None,
        module_id: Optional[str] = None
) -> str:
    """
    Compiles `source_file` and writes the IR next to it (or to `out_file`).
    Returns the path written. Nothing is written if compilation fails.
    """
    out_file = default_output_path(source_file) if out_file is None else out_file
    module_id = module_id_for(source_file) if module_id is None else module_id

    LOG.info("Compiling %s", source_file)
    with open(source_file, "r", encoding="utf-8") as f:
        ctx = compile_src(f.read(), module_id)

    ctx.write_to_file(out_file)
    LOG.info(
        "Wrote %d instructions for variables [%s] to %s",
        len(ctx.instrs), ", ".join(ctx.registry.source_names()), out_file,
    )
    return out_file
