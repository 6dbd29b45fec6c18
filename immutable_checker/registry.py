"""Check auto-discovery and registration.

Scans immutable_checker/checks/ for modules that define a `check` object
of type Check. Collects them into a dict keyed by name, ordered by
CHECK_ORDER. The order is part of the contract: the first violated rule
is the one reported.
"""

import importlib
import pkgutil

from immutable_checker.core.types import Check

_registry: dict[str, Check] = {}

# Phase order: static surface, descriptors, per-sample behaviour, pairwise equality
CHECK_ORDER = [
    'surface',
    'properties',
    'samples',
    'equality',
]


def _sort_key(modname: str) -> tuple[int, str]:
    if modname in CHECK_ORDER:
        return (CHECK_ORDER.index(modname), modname)
    return (len(CHECK_ORDER), modname)


def discover() -> dict[str, Check]:
    """Import all check modules and return the registry."""
    if _registry:
        return _registry

    import immutable_checker.checks as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]

    for modname in sorted(found_modules, key=_sort_key):
        module = importlib.import_module(f'immutable_checker.checks.{modname}')
        chk = getattr(module, 'check', None)
        if isinstance(chk, Check):
            _registry[chk.name] = chk

    return _registry


def get(name: str) -> Check:
    """Get a check by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown check: {name}. Available: {", ".join(reg)}')
    return reg[name]


def all_checks() -> dict[str, Check]:
    """Return all registered checks, in run order."""
    return discover()
