"""Per-sample behaviour of from_js and of the instances it builds.

For every sample, in order, with messages tagged `[in object i]`:

  1. from_js must not modify its input (checked on a JSON copy).
  2. The result must be an instance of the class.
  3. str(instance) must be a str.
  4. equals(None), equals([]) and equals({}) must be False.
  5. to_js() must deep-equal the sample (fixed point).
  6. equals(value_of()) must be False.
  7. equals(<dict of the instance's own fields>) must be False.
  8. cls(value_of()) must raise when new_throws is set, otherwise it must
     build an instance that equals the original with an identical to_js().
  9. from_js(json.loads(json.dumps(instance))) must equal the original with
     an identical to_js().
"""

import logging
from typing import Any

from immutable_checker.core.expect import (
    expect_deep_equal,
    expect_instance_of,
    expect_is,
    expect_raises,
    expect_type,
)
from immutable_checker.core.plain import json_copy, json_round_trip, own_fields
from immutable_checker.core.report import where
from immutable_checker.core.types import Check, CheckContext

logger = logging.getLogger(__name__)

check = Check(
    name='samples',
    help='Fixed point, non-mutation, equality rejections and round-trips for every sample.',
)


def _check_sample(ctx: CheckContext, i: int, obj: Any) -> None:
    class_name = ctx.class_name
    instance_name = ctx.instance_name
    at = where(i)
    tag = {'check': check.name, 'index': i}

    object_copy1 = json_copy(obj)
    object_copy2 = json_copy(obj)

    inst = ctx.from_js(object_copy1)
    expect_deep_equal(object_copy1, object_copy2, f'{class_name}.from_js function modified its input {at}', **tag)

    expect_instance_of(inst, ctx.class_fn, f'{class_name}.from_js did not return a {class_name} instance {at}', **tag)

    expect_type(type(inst).__str__(inst), str, f'str({instance_name}) must return a str {at}', **tag)

    expect_is(inst.equals(None), False, f'{instance_name}.equals(None) should be False {at}', **tag)
    expect_is(inst.equals([]), False, f'{instance_name}.equals([]) should be False {at}', **tag)
    expect_is(inst.equals({}), False, f'{instance_name}.equals({{}}) should be False {at}', **tag)

    expect_deep_equal(
        inst.to_js(),
        obj,
        f'{class_name}.from_js(obj).to_js() was not a fixed point (did not deep equal obj) {at}',
        **tag,
    )

    inst_value_of = inst.value_of()
    expect_is(inst.equals(inst_value_of), False, f'{instance_name}.equals({instance_name}.value_of()) {at}', **tag)

    inst_lazy_copy = own_fields(inst)
    expect_is(inst.equals(inst_lazy_copy), False, f'{instance_name}.equals(*a dict with the same fields*) {at}', **tag)

    if ctx.options.new_throws:
        expect_raises(
            lambda: ctx.class_fn(inst_value_of),
            f'{class_name}({instance_name}.value_of()) did not raise as indicated {at}',
            **tag,
        )
    else:
        inst_value_copy = ctx.class_fn(inst_value_of)
        expect_is(
            inst.equals(inst_value_copy),
            True,
            f'{class_name}({instance_name}.value_of()) is not equal to the original {at}',
            **tag,
        )
        expect_deep_equal(
            inst_value_copy.to_js(),
            inst.to_js(),
            f'{class_name}({instance_name}.value_of()).to_js() returned something bad {at}',
            **tag,
        )

    inst_json_copy = ctx.from_js(json_round_trip(inst))
    expect_is(inst.equals(inst_json_copy), True, f'JSON copy does not equal original {at}', **tag)
    expect_deep_equal(
        inst_json_copy.to_js(),
        inst.to_js(),
        f'{class_name}.from_js(json.loads(json.dumps({instance_name}))).to_js() returned something bad {at}',
        **tag,
    )


@check.run
def run(ctx: CheckContext) -> None:
    for i, obj in enumerate(ctx.objects):
        logger.debug('checking %s object %d', ctx.class_name, i)
        _check_sample(ctx, i, obj)
