"""check_immutable_class — one call that checks a class against the immutable-value convention.

Usage inside a test:

    def test_animal_is_immutable_class() -> None:
        check_immutable_class(Animal, ['Koala', 'Snake', 'Dog', 'Cat'])

    def test_weighted_animal() -> None:
        check_immutable_class(WeightedAnimal, ['Koala', 'Dog'], {'context': {'Koala': 5, 'Dog': 12}})

Checks run in registry order (surface, properties, samples, equality) and
stop at the first violation, which is raised as ConformanceViolation.
Errors raised by the class itself (for example a from_js that needs a
context it was not given) propagate unchanged.
"""

import inspect
import logging
from collections.abc import Mapping, Sequence
from dataclasses import fields
from typing import Any

from immutable_checker import registry
from immutable_checker.core.types import CheckContext, CheckOptions, ImmutableClass

logger = logging.getLogger(__name__)

_OPTION_NAMES = frozenset(f.name for f in fields(CheckOptions))


def _normalize_options(options: CheckOptions | Mapping[str, Any] | None) -> CheckOptions:
    if options is None:
        return CheckOptions()
    if isinstance(options, CheckOptions):
        return options
    if isinstance(options, Mapping):
        unknown = set(options) - _OPTION_NAMES
        if unknown:
            raise TypeError(f'Unknown options: {", ".join(sorted(map(str, unknown)))}')
        return CheckOptions(**options)
    raise TypeError(f'options must be a CheckOptions or a mapping, got {type(options).__name__}')


def check_immutable_class(
    class_fn: ImmutableClass,
    objects: Sequence[Any],
    options: CheckOptions | Mapping[str, Any] | None = None,
) -> None:
    """Check that class_fn follows the immutable-value convention on the given samples.

    Args:
        class_fn: The class under test.
        objects: Non-empty list (or tuple) of pairwise-distinct plain-data samples.
        options: CheckOptions, or a mapping with `new_throws` and/or `context`.

    Raises:
        TypeError: class_fn is not a class, objects is not a non-empty list, or options are malformed.
        ValueError: the class has an empty name.
        ConformanceViolation: the first rule the class breaks.
    """
    if not inspect.isclass(class_fn):
        raise TypeError('class_fn must be a class')
    if not isinstance(objects, (list, tuple)) or not objects:
        raise TypeError('objects must be a non-empty list of plain data to test')
    opts = _normalize_options(options)

    if len(class_fn.__name__) < 1:
        raise ValueError('Class must have a name of at least 1 letter')

    ctx = CheckContext(class_fn=class_fn, objects=objects, options=opts)
    logger.debug('checking %s against %d object(s)', ctx.class_name, len(objects))

    for name, chk in registry.all_checks().items():
        logger.debug('running %s check on %s', name, ctx.class_name)
        chk.execute(ctx)
