"""Shape of the optional PROPERTIES descriptor list.

Classes that declare PROPERTIES must make it a list (or tuple) of
mappings. Every key of every descriptor must be one of PROPERTY_KEYS and
every descriptor must carry a str `name`.

Classes without PROPERTIES (or with an empty one) are the simple style
and skip this check.
"""

import logging
from collections.abc import Mapping

from immutable_checker.core.expect import expect, expect_type
from immutable_checker.core.report import describe
from immutable_checker.core.types import Check, CheckContext

logger = logging.getLogger(__name__)

check = Check(
    name='properties',
    help='PROPERTIES is a list of descriptors using only recognized keys, each with a str name.',
)

PROPERTY_KEYS = (
    'name',
    'default_value',
    'possible_values',
    'validate',
    'immutable_class',
    'immutable_class_array',
    'immutable_class_lookup',
    'equal',
    'to_js',
    'type',
    'context_transform',
    'preserve_undefined',
    'empty_array_is_ok',
)


@check.run
def run(ctx: CheckContext) -> None:
    properties = getattr(ctx.class_fn, 'PROPERTIES', None)
    if not properties:
        logger.debug('%s has no PROPERTIES, skipping descriptor check', ctx.class_name)
        return

    expect_type(properties, (list, tuple), 'PROPERTIES should be a list', kind='list', check=check.name)
    for n, prop in enumerate(properties):
        label = f'{ctx.class_name}.PROPERTIES[{n}]'
        expect_type(prop, Mapping, f'{label} should be a mapping', check=check.name)
        for key in prop:
            expect(
                key in PROPERTY_KEYS,
                f'{label} has unknown key {describe(key)}, expected one of {", ".join(PROPERTY_KEYS)}',
                check=check.name,
            )
        expect_type(prop.get('name'), str, f'{label} name should be a str', check=check.name)
