from __future__ import annotations

import asyncio
import threading

import pytest

from credential_hasher.application.services.async_password_hasher import AsyncPasswordHasher
from credential_hasher.domain.kdf_parameters import KdfParameters
from credential_hasher.infrastructure.security.pbkdf2_password_hasher import Pbkdf2PasswordHasher


class BlockingPasswordHasher:
    def __init__(self) -> None:
        self.release = threading.Event()
        self.threads: list[str] = []

    def hash_password(self, password: str | bytes) -> str:
        self.threads.append(threading.current_thread().name)
        self.release.wait(timeout=5)
        return f"hashed::{password!r}"

    def verify_password(self, *, password: str | bytes, password_hash: str) -> bool:
        self.threads.append(threading.current_thread().name)
        self.release.wait(timeout=5)
        return password_hash == f"hashed::{password!r}"


@pytest.mark.asyncio
async def test_hash_and_verify_round_trip_through_worker_threads() -> None:
    hasher = AsyncPasswordHasher(
        password_hasher=Pbkdf2PasswordHasher(parameters=KdfParameters(iterations=1_000)),
    )

    password_hash = await hasher.hash_password("MySecurePassword123!")

    assert await hasher.verify_password(
        password="MySecurePassword123!",
        password_hash=password_hash,
    )
    assert not await hasher.verify_password(
        password="AnotherPassword456#",
        password_hash=password_hash,
    )
    assert not await hasher.verify_password(
        password="MySecurePassword123!",
        password_hash="invalid-hash-without-separator",
    )


@pytest.mark.asyncio
async def test_blocking_work_runs_off_the_event_loop_thread() -> None:
    fake = BlockingPasswordHasher()
    hasher = AsyncPasswordHasher(password_hasher=fake)

    pending = asyncio.create_task(hasher.hash_password("pw"))
    await asyncio.sleep(0.05)
    assert not pending.done()

    fake.release.set()

    assert await pending == "hashed::'pw'"
    assert threading.current_thread().name not in fake.threads


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent() -> None:
    hasher = AsyncPasswordHasher(
        password_hasher=Pbkdf2PasswordHasher(parameters=KdfParameters(iterations=1_000)),
    )
    passwords = [f"password-{index}" for index in range(8)]

    hashes = await asyncio.gather(*(hasher.hash_password(password) for password in passwords))
    results = await asyncio.gather(
        *(
            hasher.verify_password(password=password, password_hash=password_hash)
            for password, password_hash in zip(passwords, hashes, strict=True)
        )
    )

    assert len(set(hashes)) == len(passwords)
    assert all(results)


@pytest.mark.asyncio
async def test_deadline_expiry_raises_timeout_and_abandons_call(
    caplog: pytest.LogCaptureFixture,
) -> None:
    fake = BlockingPasswordHasher()
    hasher = AsyncPasswordHasher(password_hasher=fake, timeout_seconds=0.05)

    with caplog.at_level("WARNING"), pytest.raises(TimeoutError):
        await hasher.verify_password(password="pw", password_hash="hashed::'pw'")

    fake.release.set()
    assert "credential_verify_abandoned" in caplog.text


@pytest.mark.parametrize("timeout_seconds", [0, -1.0])
def test_non_positive_timeout_is_rejected(timeout_seconds: float) -> None:
    with pytest.raises(ValueError):
        AsyncPasswordHasher(
            password_hasher=Pbkdf2PasswordHasher(),
            timeout_seconds=timeout_seconds,
        )
