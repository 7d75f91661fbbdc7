"""Run-to-completion dispatch of session events."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
import logging
from typing import Any

from timed_quiz.core.errors import InvalidCommandError

logger = logging.getLogger(__name__)


class CommandQueue:
    """Hands commands to a single handler, one at a time.

    A command posted while another is being handled (for example a
    full-screen change reported synchronously during an open request) waits
    until the current handler returns. Commands run in posting order.
    """

    def __init__(self, handler: Callable[[Any], Any]) -> None:
        self._handler = handler
        self._pending: deque[Any] = deque()
        self._draining: bool = False

    def post(self, command: Any) -> Any:
        """Queue a command and drain the queue if nobody else is.

        Returns the handler's result for this command when it ran
        immediately, otherwise None. An InvalidCommandError raised for this
        command is re-raised once the queue is drained; one raised for a
        queued command is logged, since its poster has already returned.
        Any other error propagates at once and drops the commands still
        waiting, so they never run after later, unrelated posts.
        """
        self._pending.append(command)
        if self._draining:
            return None

        self._draining = True
        result: Any = None
        error: InvalidCommandError | None = None
        try:
            while self._pending:
                current = self._pending.popleft()
                try:
                    outcome = self._handler(current)
                except InvalidCommandError as exc:
                    if current is command:
                        error = exc
                    else:
                        logger.warning("Rejected queued command %r: %s", current, exc)
                    continue
                if current is command:
                    result = outcome
        except Exception:
            if self._pending:
                logger.error("Dropping %d queued command(s) after a handler failure", len(self._pending))
                self._pending.clear()
            raise
        finally:
            self._draining = False

        if error is not None:
            raise error
        return result
