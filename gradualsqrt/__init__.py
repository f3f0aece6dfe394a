from .integral import ops, utils, intmath
from .arithmetic import evalctx, floor, closest, gradual

RM = ops.RM
DIR = ops.DIR
IsqrtCtx = evalctx.IsqrtCtx
isqrt_ctx = evalctx.isqrt_ctx
int_type = evalctx.int_type
make_generator = gradual.make_generator
changing_from = gradual.changing_from
ascending_from = gradual.ascending_from
descending_from = gradual.descending_from
GradualSqrtError = utils.GradualSqrtError
DomainError = utils.DomainError
WidthError = utils.WidthError
