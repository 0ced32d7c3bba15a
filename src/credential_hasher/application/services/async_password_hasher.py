"""Event-loop friendly wrapper around blocking password hashers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import TypeVar

from credential_hasher.application.ports.password_hasher_port import PasswordHasherPort

_T = TypeVar("_T")
logger = logging.getLogger(__name__)


class AsyncPasswordHasher:
    """Run hash/verify calls in worker threads so the event loop keeps serving.

    A deadline only bounds how long the caller waits. The derivation already
    running in its worker thread cannot be interrupted and completes in the
    background; its result is discarded.
    """

    def __init__(
        self,
        *,
        password_hasher: PasswordHasherPort,
        timeout_seconds: float | None = None,
    ) -> None:
        if timeout_seconds is not None and timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive when set")
        self._password_hasher = password_hasher
        self._timeout_seconds = timeout_seconds

    async def hash_password(self, password: str | bytes) -> str:
        """Hash plaintext password in a worker thread."""

        return await self._run(
            "hash",
            asyncio.to_thread(self._password_hasher.hash_password, password),
        )

    async def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        """Verify plaintext password against stored hash in a worker thread."""

        return await self._run(
            "verify",
            asyncio.to_thread(
                self._password_hasher.verify_password,
                password=password,
                password_hash=password_hash,
            ),
        )

    async def _run(self, operation: str, call: Awaitable[_T]) -> _T:
        if self._timeout_seconds is None:
            return await call
        try:
            return await asyncio.wait_for(call, timeout=self._timeout_seconds)
        except TimeoutError:
            logger.warning(
                "credential_%s_abandoned timeout_seconds=%s",
                operation,
                self._timeout_seconds,
            )
            raise
