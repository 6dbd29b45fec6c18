"""Instances are equal only to themselves.

For every pair (j, k) with j <= k, from_js(objects[j]).equals(from_js(objects[k]))
must be True exactly when j == k.

Samples must therefore be pairwise distinct plain data. Two deep-equal
samples at different indices make this check fail; the message says so,
since the fixture is at fault rather than the class.
"""

import logging

from immutable_checker.core.expect import expect_is
from immutable_checker.core.plain import deep_equal
from immutable_checker.core.types import Check, CheckContext

logger = logging.getLogger(__name__)

check = Check(
    name='equality',
    help='Pairwise equals() over all samples is True only on the diagonal.',
)


@check.run
def run(ctx: CheckContext) -> None:
    objects = ctx.objects
    logger.debug('checking pairwise equality of %d %s objects', len(objects), ctx.class_name)
    for j in range(len(objects)):
        object_j = ctx.from_js(objects[j])
        for k in range(j, len(objects)):
            object_k = ctx.from_js(objects[k])
            message = f'Equality of objects {j} and {k} was wrong'
            if j != k and deep_equal(objects[j], objects[k]):
                message += f' (objects {j} and {k} are duplicates; samples must be distinct)'
            expect_is(object_j.equals(object_k), j == k, message, check=check.name)
