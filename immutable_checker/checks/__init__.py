"""Conformance check modules.

Every .py file in this package that defines a `check` object is
auto-registered by immutable_checker.registry.discover(), in the order
given by registry.CHECK_ORDER.
"""
