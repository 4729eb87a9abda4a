"""
Request/result state for one user-triggered action.

    idle -> pending -> success | failure

Nothing here knows about Flask; the pages turn the final state into a
flashed message.
"""

import logging

from services.errors import MovieTrackerError

logger = logging.getLogger(__name__)

IDLE = "idle"
PENDING = "pending"
SUCCESS = "success"
FAILURE = "failure"


class ActionState:
    def __init__(self, name, success_message=None, failure_message=None):
        self.name = name
        self.success_message = success_message
        self.failure_message = failure_message
        self.status = IDLE
        self.result = None
        self.error = None

    @property
    def is_loading(self):
        return self.status == PENDING

    @property
    def succeeded(self):
        return self.status == SUCCESS

    @property
    def failed(self):
        return self.status == FAILURE

    def start(self):
        if self.status == PENDING:
            raise RuntimeError(f"Action '{self.name}' is already running")
        self.status = PENDING
        self.result = None
        self.error = None

    def succeed(self, result=None):
        self._check_pending()
        self.status = SUCCESS
        self.result = result

    def fail(self, error):
        self._check_pending()
        self.status = FAILURE
        self.error = error

    def _check_pending(self):
        if self.status != PENDING:
            raise RuntimeError(
                f"Action '{self.name}' is {self.status}, not {PENDING}"
            )

    def run(self, func, *args, **kwargs):
        """
        Run ``func`` through the state machine. Tracker errors become a
        failure state; anything else propagates.
        """
        self.start()
        try:
            result = func(*args, **kwargs)
        except MovieTrackerError as e:
            logger.warning(f"Action '{self.name}' failed: {e.message}")
            self.fail(e)
            return self
        self.succeed(result)
        return self

    @property
    def message(self):
        """Notification text for the current state, or None while idle/pending."""
        if self.status == SUCCESS:
            return self.success_message
        if self.status == FAILURE:
            return self.failure_message or (self.error and self.error.message)
        return None

    def __repr__(self):
        return f"<ActionState {self.name} status={self.status}>"
