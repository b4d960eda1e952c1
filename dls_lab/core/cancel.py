# dls_lab/core/cancel.py
# Cooperative cancellation: other threads set a token, the search polls it once per node.
from __future__ import annotations
import threading

from .log import get_logger

logger = get_logger(__name__)


class CancellationToken:
    """A flag any thread may set; searches only ever read it."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def reset(self) -> None:
        self._event.clear()

    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled()})"


# Shared by every search that is not handed its own token.
DEFAULT_TOKEN = CancellationToken()


def cancel_after(token: CancellationToken, seconds: float) -> threading.Timer:
    """Start a daemon timer that cancels `token` after `seconds`. Call .cancel() on the timer to disarm it."""
    def _fire():
        logger.info("time limit of %.3fs reached, cancelling search", seconds)
        token.cancel()

    timer = threading.Timer(seconds, _fire)
    timer.daemon = True
    timer.start()
    return timer
