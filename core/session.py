"""
Externally paced learning sessions.

A LearningSession owns one learner and its step generator. The caller pulls
events one at a time (manual stepping, a timer, or a fast mode that only
stops at important events); the session never runs on its own.
"""

import logging
from typing import Iterator, Optional

from .dfa import DFA
from .events import QueryCounters, StepEvent
from .lstar import DEFAULT_STRATEGY, LStarAlgorithm

logger = logging.getLogger(__name__)


class SessionAbortedError(RuntimeError):
    """Raised when resuming a session whose teacher has failed."""


class LearningSession:
    """One resumable L* run over a teacher."""

    def __init__(self, teacher, counterexample_strategy=DEFAULT_STRATEGY):
        """
        Create a session; nothing is queried until the first step.

        Args:
            teacher: Oracle with alphabet, membership and equivalence
            counterexample_strategy: Counterexample processing strategy name
        """
        self.teacher = teacher
        self.counterexample_strategy = counterexample_strategy
        self._start(LStarAlgorithm(teacher, counterexample_strategy))

    def _start(self, learner: LStarAlgorithm):
        self.learner = learner
        self._steps = learner.steps()
        self.result: Optional[DFA] = None
        self.last_event: Optional[StepEvent] = None
        self.error: Optional[BaseException] = None
        self.events_emitted = 0

    @property
    def done(self) -> bool:
        return self.result is not None

    @property
    def aborted(self) -> bool:
        return self.error is not None

    @property
    def counters(self) -> QueryCounters:
        return self.learner.counters

    def step(self) -> Optional[StepEvent]:
        """
        Resume until the next event.

        Returns:
            The next event, or None once learning has finished (the learned
            DFA is then in self.result)

        Raises:
            SessionAbortedError: If an earlier step failed
            Any exception raised by the teacher during this step, unmodified
        """
        if self.aborted:
            raise SessionAbortedError(
                f"The session was aborted by {type(self.error).__name__}: {self.error}. "
                f"Restart it to learn again.")
        if self.done:
            return None

        try:
            event = next(self._steps)
        except StopIteration as stop:
            if stop.value is None:
                self.error = SessionAbortedError("The learner stopped without a result.")
                raise self.error
            self.result = stop.value
            return None
        except BaseException as exc:
            self.error = exc
            logger.error("Learning session aborted by %s: %s", type(exc).__name__, exc)
            raise

        self.last_event = event
        self.events_emitted += 1
        return event

    def advance(self) -> Optional[StepEvent]:
        """
        Resume until the next important event.

        Intermediate events are still produced, and their queries issued;
        they are just not returned.
        """
        while True:
            event = self.step()
            if event is None or event.important:
                return event

    def run(self) -> DFA:
        """Drive the session to completion and return the learned DFA."""
        while self.step() is not None:
            pass
        return self.result

    def restart(self, teacher=None, counterexample_strategy=None):
        """
        Discard all progress and start a fresh table.

        Args:
            teacher: Replacement teacher (default: keep the current one)
            counterexample_strategy: Replacement strategy (default: keep)

        Raises:
            ValueError: If the strategy is unknown; the session is unchanged
        """
        teacher = self.teacher if teacher is None else teacher
        if counterexample_strategy is None:
            counterexample_strategy = self.counterexample_strategy
        learner = LStarAlgorithm(teacher, counterexample_strategy)

        self._steps.close()
        self.teacher = teacher
        self.counterexample_strategy = counterexample_strategy
        self._start(learner)

    def __iter__(self) -> Iterator[StepEvent]:
        while True:
            event = self.step()
            if event is None:
                return
            yield event
