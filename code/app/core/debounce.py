import logging
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

QUICK_ADVICE_DELAY = 1.5


class LatestResultSlot:
    """Debounced holder for the most recent result of a slow call.

    Each ``submit`` replaces the still-waiting timer, so rapid input changes
    fire only one call. Calls that already started are left to finish; their
    result is kept only if no newer submission arrived in the meantime.
    """

    def __init__(self, delay: float = QUICK_ADVICE_DELAY):
        self.delay = delay
        self._lock = threading.Lock()
        self._generation = 0
        self._timer: Optional[threading.Timer] = None
        self._resolved_generation = 0
        self._value: Any = None

    def submit(self, fn: Callable[..., Any], *args, **kwargs) -> int:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            generation = self._generation
            timer = threading.Timer(self.delay, self._run, args=(generation, fn, args, kwargs))
            timer.daemon = True
            self._timer = timer
        timer.start()
        return generation

    def _run(self, generation: int, fn: Callable[..., Any], args, kwargs) -> None:
        failed = False
        value = None
        try:
            value = fn(*args, **kwargs)
        except Exception:
            logger.exception("Debounced call %d failed", generation)
            failed = True
        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding superseded result %d (latest %d)", generation, self._generation)
                return
            # A failed call resolves the slot but keeps the previous value.
            if not failed:
                self._value = value
            self._resolved_generation = generation

    def latest(self) -> Any:
        with self._lock:
            return self._value

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._resolved_generation != self._generation

    def wait(self, timeout: Optional[float] = None) -> None:
        with self._lock:
            timer = self._timer
        if timer is not None:
            timer.join(timeout)

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            # Bumping the generation also drops a call that is already running.
            self._generation += 1
            self._resolved_generation = self._generation
