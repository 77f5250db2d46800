import pytest

from calcir.ir import gen_ctx


@pytest.fixture
def ctx() -> gen_ctx.IrGenCtx:
    ctx = gen_ctx.IrGenCtx()
    ctx.line = 1
    return ctx
