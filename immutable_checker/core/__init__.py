"""immutable_checker.core — Foundation layer.

Contains the shared types, plain-data helpers, assertion helpers and message formatting.
This module has NO dependencies on immutable_checker.checks or immutable_checker.registry.
Only stdlib is allowed here.
"""
