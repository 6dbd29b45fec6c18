"""immutable-checker — conformance checks for immutable value classes.

A class follows the convention when it has a `from_js(value, context=None)`
factory and its instances implement `to_js`, `to_json`, `value_of`,
`equals` and `__str__` so that plain data survives every round-trip.
See immutable_checker.tester for the entry point.
"""

from immutable_checker.checks.properties import PROPERTY_KEYS
from immutable_checker.core.expect import ConformanceViolation
from immutable_checker.core.types import CheckOptions
from immutable_checker.tester import check_immutable_class

__all__ = [
    'PROPERTY_KEYS',
    'CheckOptions',
    'ConformanceViolation',
    'check_immutable_class',
]
