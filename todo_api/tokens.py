import threading
import time
from typing import Callable, Optional


def epoch_ms() -> int:
    return int(time.time() * 1000)


class TokenRegistry:
    """
    Issued tokens and their expiry (epoch milliseconds).
    Entries are never removed; an expired token simply stops validating.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self.clock = clock or epoch_ms
        self._tokens: dict[str, int] = {}
        self._lock = threading.RLock()

    def now_ms(self) -> int:
        return self.clock()

    def record(self, token: str, exp_ms: int) -> None:
        with self._lock:
            self._tokens[token] = exp_ms

    def expiry_of(self, token: str) -> Optional[int]:
        with self._lock:
            return self._tokens.get(token)

    def is_valid(self, token: str) -> bool:
        exp_ms = self.expiry_of(token)
        if exp_ms is None:
            return False
        return exp_ms > self.now_ms()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


token_registry = TokenRegistry()


def get_token_registry() -> TokenRegistry:
    return token_registry
