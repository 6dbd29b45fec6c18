"""Shared types for immutable-checker: CheckOptions, CheckContext, Check and the convention protocols."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol


class ImmutableInstance(Protocol):
    """What an instance of an immutable class exposes."""

    def to_js(self) -> Any: ...

    def to_json(self) -> Any: ...

    def value_of(self) -> Any: ...

    def equals(self, other: Any) -> bool: ...


class ImmutableClass(Protocol):
    """What a class following the immutable-value convention exposes."""

    PROPERTIES: ClassVar[Sequence[dict[str, Any]]]

    def __call__(self, value: Any) -> ImmutableInstance: ...

    def from_js(self, value: Any, context: Any = None) -> ImmutableInstance: ...


@dataclass(frozen=True)
class CheckOptions:
    """Options for a single conformance run."""

    new_throws: bool = False  # direct construction from value_of() must raise
    context: Any = None  # forwarded as the second argument of every from_js call


@dataclass
class CheckContext:
    """Everything a check needs: the class under test, its samples and the options."""

    class_fn: ImmutableClass
    objects: Sequence[Any]
    options: CheckOptions

    @property
    def class_name(self) -> str:
        return self.class_fn.__name__

    @property
    def instance_name(self) -> str:
        name = self.class_name
        return name[0].lower() + name[1:]

    def from_js(self, value: Any) -> ImmutableInstance:
        """Build an instance from plain data, always forwarding the context."""
        return self.class_fn.from_js(value, self.options.context)


class Check:
    """A self-registering conformance check.

    Usage in a check module:

        check = Check(name='surface', help='Static surface of the class')

        @check.run
        def run(ctx):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, ctx: CheckContext) -> None:
        """Execute the check's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Check {self.name} has no run function')
        self._run_fn(ctx)
