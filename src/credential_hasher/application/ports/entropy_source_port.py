"""Port for the cryptographically secure random source used for salts."""

from __future__ import annotations

from collections.abc import Callable

EntropySource = Callable[[int], bytes]
