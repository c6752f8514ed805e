"""Callable shapes for setup and measure operations.

The runner never inspects a callable's signature. Callers pick the shape
explicitly:

    Operation.plain(fn)       # fn()
    Operation.indexed(fn)     # fn(index, runner), for measure operations
    Operation.contextual(fn)  # fn(runner), for setup operations

A bare callable passed to ``Runner.setup`` is treated as contextual and one
passed to ``Runner.measure`` as indexed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from clientbench.runner.runner import Runner


class Operation(ABC):
    """A user-supplied unit of work invoked by the runner."""

    def __init__(self, func: Callable[..., Any]) -> None:
        if not callable(func):
            raise TypeError(f"Operation requires a callable, got {type(func).__name__}")
        self.func = func

    @abstractmethod
    def __call__(self, index: int, runner: Runner) -> Any:
        """Invoke the operation for repetition ``index``."""
        ...

    @classmethod
    def plain(cls, func: Callable[[], Any]) -> Operation:
        """Wrap a zero-argument callable."""
        return PlainOperation(func)

    @classmethod
    def indexed(cls, func: Callable[[int, Runner], Any]) -> Operation:
        """Wrap a callable receiving (index, runner)."""
        return IndexedOperation(func)

    @classmethod
    def contextual(cls, func: Callable[[Runner], Any]) -> Operation:
        """Wrap a callable receiving only the runner."""
        return ContextualOperation(func)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{self.__class__.__name__}({name})"


class PlainOperation(Operation):
    """Operation called without arguments."""

    def __call__(self, index: int, runner: Runner) -> Any:
        return self.func()


class IndexedOperation(Operation):
    """Operation called with the repetition index and the runner."""

    def __call__(self, index: int, runner: Runner) -> Any:
        return self.func(index, runner)


class ContextualOperation(Operation):
    """Operation called with the runner only."""

    def __call__(self, index: int, runner: Runner) -> Any:
        return self.func(runner)


def as_setup(operation: Operation | Callable[..., Any]) -> Operation:
    """Return ``operation`` as an Operation, wrapping bare callables as contextual."""
    if isinstance(operation, Operation):
        return operation
    return ContextualOperation(operation)


def as_measure(operation: Operation | Callable[..., Any]) -> Operation:
    """Return ``operation`` as an Operation, wrapping bare callables as indexed."""
    if isinstance(operation, Operation):
        return operation
    return IndexedOperation(operation)
