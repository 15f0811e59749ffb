"""Helpers that apply a function across a variable list of arguments."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def apply(func: Callable[[Any], Any], *args: Any) -> None:
    """Call ``func`` on each argument in turn."""
    for arg in args:
        func(arg)


def count(func: Callable[[Any], Any], *args: Any) -> int:
    """Number of arguments for which ``func`` is true."""
    return sum(1 for arg in args if func(arg))


def reduce(func: Callable[[T, Any], T], first: T, *args: Any) -> T:
    """Fold ``args`` into ``first`` with ``func``."""
    acc = first
    for arg in args:
        acc = func(acc, arg)
    return acc


def every(func: Callable[[Any], Any], *args: Any) -> bool:
    """True when ``func`` holds for all arguments; False when there are none."""
    if not args:
        return False
    return count(func, *args) == len(args)


def some(func: Callable[[Any], Any], *args: Any) -> bool:
    """True when ``func`` holds for at least one argument."""
    if not args:
        return False
    return count(func, *args) > 0


def none(func: Callable[[Any], Any], *args: Any) -> bool:
    """True when ``func`` holds for no argument; False when there are none."""
    if not args:
        return False
    return count(func, *args) == 0


def join(sep: str, *args: Any) -> str:
    """Join the string forms of ``args`` with ``sep``."""
    return sep.join(str(arg) for arg in args)