import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class PeriodicTask:
    """
    Runs `action` every `interval_seconds` on a daemon thread until cancelled.

    The first run happens one interval after start(). Exceptions raised by the
    action are logged and the loop keeps going. Every start() gets its own stop
    event, so a loop still finishing a slow action after cancel() never comes
    back to life when the task is started again.
    """
    def __init__(self, name: str, interval_seconds: float, action: Callable[[], object]):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")

        self.name = name
        self.interval_seconds = interval_seconds
        self.action = action

        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and self._stop_event is not None
            and not self._stop_event.is_set()
        )

    def start(self) -> None:
        if self.is_running:
            return
        stop_event = threading.Event()
        self._stop_event = stop_event
        self._thread = threading.Thread(target=self._run, args=(stop_event,), name=self.name, daemon=True)
        self._thread.start()
        logger.info(f"Started periodic task '{self.name}' every {self.interval_seconds}s")

    def cancel(self, timeout: float = 5.0) -> None:
        """Stop the loop. Safe to call more than once."""
        if self._stop_event is not None:
            self._stop_event.set()

        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=timeout)
            if thread.is_alive():
                # stuck in the action (e.g. a slow HTTP call); it exits once that returns
                logger.warning(f"Periodic task '{self.name}' still finishing its current run")
        self._thread = None
        logger.info(f"Cancelled periodic task '{self.name}'")

    def _run(self, stop_event: threading.Event) -> None:
        # wait() returns True as soon as cancel() sets the event
        while not stop_event.wait(self.interval_seconds):
            try:
                self.action()
            except Exception:
                logger.exception(f"Periodic task '{self.name}' failed")
