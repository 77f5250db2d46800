"""
# LLVM-flavored Intermediate Representation (IR)

## Rules

    * Every value is a 32-bit signed integer.

    * Source variables live in stack slots (`ir.Slot`) created with
      `alloca`. They are never used directly as operands; each use is a
      fresh `load` into a `ir.Temp`.

    * `ir.Temp` values are numbered `%1`, `%2`, ... in definition order and
      are defined exactly once. The numbering is dense because LLVM requires
      unnamed values to be numbered sequentially. The `i32` returned by each
      `printf` call takes a number too.

      EX:

        ```
        x = 2 + y
        ```

        Translates to:

        ```
        %x = alloca i32
        %1 = load i32* %y
        %2 = add i32 2, %1
        store i32 %2, i32* %x
        ```
"""
