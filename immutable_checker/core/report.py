"""Message formatting for conformance violations."""

from typing import Any


def where(index: int) -> str:
    """Tag appended to every per-sample message."""
    return f'[in object {index}]'


def describe(value: Any) -> str:
    """Render a value the way it appears in violation messages."""
    if isinstance(value, type):
        return value.__name__
    try:
        return repr(value)
    except Exception as e:  # user __repr__ can raise
        return f'<unrepresentable {type(value).__name__}: {e}>'


def format_expected(message: str, actual: Any, relation: str, expected: Any = None, show_expected: bool = True) -> str:
    """Build `<message>: expected <actual> <relation> <expected>`."""
    text = f'{message}: expected {describe(actual)} {relation}'
    if show_expected:
        text += f' {describe(expected)}'
    return text
