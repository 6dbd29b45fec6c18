"""Static surface of the class and of one reference instance.

The class must expose a callable `from_js`. An instance built from the
first sample must override `__str__`, and expose callable `value_of`,
`to_js`, `to_json` and `equals`.

Runs before any per-sample work so that a class without a factory is
rejected without touching the samples.
"""

import logging

from immutable_checker.core.expect import expect, expect_callable
from immutable_checker.core.plain import json_copy
from immutable_checker.core.types import Check, CheckContext

logger = logging.getLogger(__name__)

check = Check(
    name='surface',
    help='from_js exists; instances implement __str__, value_of, to_js, to_json and equals.',
)


@check.run
def run(ctx: CheckContext) -> None:
    expect_callable(getattr(ctx.class_fn, 'from_js', None), f'{ctx.class_name}.from_js should exist', check=check.name)

    instance = ctx.from_js(json_copy(ctx.objects[0]))
    logger.debug('probing %s instance built from object 0', ctx.class_name)

    expect_callable(getattr(instance, 'value_of', None), 'Instance should implement value_of', check=check.name)
    expect(type(instance).__str__ is not object.__str__, 'Instance should implement __str__', check=check.name)
    expect_callable(getattr(instance, 'to_js', None), 'Instance should have a to_js function', check=check.name)
    expect_callable(getattr(instance, 'to_json', None), 'Instance should have a to_json function', check=check.name)
    expect_callable(getattr(instance, 'equals', None), 'Instance should have an equals function', check=check.name)
