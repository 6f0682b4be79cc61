"""Readiness evaluation."""
from __future__ import annotations

import inspect
from typing import Awaitable, Callable, Iterable

from fastapi import Request

ReadinessCheck = Callable[[], Awaitable[None]]


class ReadinessCheckFailed(RuntimeError):
    """Raised by a readiness check when a dependency cannot be used."""


def _is_async_callable(check: object) -> bool:
    if inspect.iscoroutinefunction(check):
        return True
    return inspect.iscoroutinefunction(getattr(check, "__call__", None))


class ReadinessProbe:
    """Ordered collection of checks that must pass before traffic is accepted.

    A check is an async callable with no arguments. It signals failure by
    raising; the first exception stops evaluation and propagates unchanged.
    Plain functions are rejected with ``TypeError`` when registered. An
    empty probe is always ready.
    """

    def __init__(self, checks: Iterable[ReadinessCheck] = ()):
        self._checks: list[ReadinessCheck] = []
        for check in checks:
            self.register(check)

    @property
    def checks(self) -> tuple[ReadinessCheck, ...]:
        return tuple(self._checks)

    def register(self, check: ReadinessCheck) -> ReadinessCheck:
        """Append ``check``. Returns it unchanged so this works as a decorator."""

        if not _is_async_callable(check):
            raise TypeError(f"readiness check {check!r} must be an async callable")
        self._checks.append(check)
        return check

    async def evaluate(self) -> None:
        for check in self._checks:
            await check()

    def __len__(self) -> int:
        return len(self._checks)


def get_readiness_probe(request: Request) -> ReadinessProbe:
    """FastAPI dependency returning the probe attached to the running app."""

    return request.app.state.readiness


__all__ = [
    "ReadinessCheck",
    "ReadinessCheckFailed",
    "ReadinessProbe",
    "get_readiness_probe",
]
