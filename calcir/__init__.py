"""
Compiles a tiny line-oriented arithmetic language into LLVM-style textual IR.

Each source line is either an assignment (`x = 2 + 3 * 4`) or a bare
expression whose value is printed (`x`).
"""
