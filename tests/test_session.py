"""Tests for externally paced learning sessions."""

import pytest

from core.session import LearningSession, SessionAbortedError
from teacher.teacher import DFATeacher


class TestStepping:
    """Test manual and important-only stepping."""

    def test_nothing_happens_before_first_step(self, three_states_teacher):
        session = LearningSession(three_states_teacher)

        assert three_states_teacher.membership_count == 0
        assert session.events_emitted == 0
        assert session.counters.membership_queries == 0

    def test_step_returns_one_event(self, three_states_teacher):
        session = LearningSession(three_states_teacher)

        event = session.step()

        assert event.message == 'A separator "" is added to the observation table.'
        assert session.last_event is event
        assert session.events_emitted == 1
        assert not session.done

    def test_advance_returns_important_events(self, three_states_teacher):
        session = LearningSession(three_states_teacher, "rivest-schapire")

        messages = []
        while True:
            event = session.advance()
            if event is None:
                break
            assert event.important
            messages.append(event.message)

        assert messages == [
            'A separator "" is added to the observation table.',
            'A state prefix "" is added to the observation table.',
            'The extension prefix "0" is promoted to a state prefix.',
            'The observation table is closed and consistent.',
            'A counterexample "010" is found.',
            'A separator "0" is added to the observation table.',
            'The extension prefix "01" is promoted to a state prefix.',
            'The observation table is closed and consistent.',
            'The hypothesis is equivalent to the target automaton. Learning is done.',
        ]
        assert session.done
        assert session.events_emitted == 29

    def test_skipping_events_does_not_change_queries(self, three_states):
        stepped = LearningSession(DFATeacher(three_states), "angluin")
        advanced = LearningSession(DFATeacher(three_states), "angluin")

        while stepped.step() is not None:
            pass
        while advanced.advance() is not None:
            pass

        assert stepped.counters == advanced.counters
        assert stepped.result == advanced.result

    def test_run_and_finished_session(self, three_states_teacher):
        session = LearningSession(three_states_teacher, "maler-pnueli")

        result = session.run()

        assert session.done
        assert result is session.result
        assert result.equivalence(three_states_teacher.target) is True
        assert session.step() is None
        assert session.advance() is None

    def test_iteration_yields_every_event(self, even_zeros_teacher):
        session = LearningSession(even_zeros_teacher)

        events = list(session)

        assert len(events) == session.events_emitted
        assert events[-1].message.endswith("Learning is done.")
        assert len(session.result) == 2


class TestRestart:
    """Test discarding progress."""

    def test_restart_clears_progress(self, three_states_teacher):
        session = LearningSession(three_states_teacher)
        for _ in range(5):
            session.step()

        session.restart()

        assert session.events_emitted == 0
        assert session.counters.membership_queries == 0
        assert session.last_event is None
        assert session.step().message == 'A separator "" is added to the observation table.'

    def test_restart_with_new_teacher_and_strategy(self, three_states_teacher, even_zeros):
        session = LearningSession(three_states_teacher, "angluin")
        session.run()

        session.restart(teacher=DFATeacher(even_zeros),
                        counterexample_strategy="rivest-schapire")

        assert not session.done
        assert session.learner.strategy.value == "rivest-schapire"
        assert session.run() == even_zeros


class TestAbort:
    """Test teacher failures."""

    def test_teacher_error_aborts_session(self, scripted_teacher):
        teacher = scripted_teacher(["0"], lambda word: True,
                                   answers=[TimeoutError("no answer")])
        session = LearningSession(teacher)

        with pytest.raises(TimeoutError, match="no answer"):
            session.run()

        assert session.aborted
        assert isinstance(session.error, TimeoutError)
        with pytest.raises(SessionAbortedError):
            session.step()

    def test_interrupt_aborts_session(self, scripted_teacher):
        calls = []

        def interrupted(word):
            calls.append(word)
            if len(calls) == 2:
                raise KeyboardInterrupt
            return True

        session = LearningSession(scripted_teacher(["0"], interrupted))

        with pytest.raises(KeyboardInterrupt):
            session.run()

        assert session.aborted
        assert not session.done
        with pytest.raises(SessionAbortedError):
            session.step()
        with pytest.raises(SessionAbortedError):
            session.run()

    def test_restart_with_unknown_strategy_keeps_session(self, three_states_teacher):
        session = LearningSession(three_states_teacher, "angluin")
        session.step()

        with pytest.raises(ValueError):
            session.restart(counterexample_strategy="nope")

        assert session.counterexample_strategy == "angluin"
        assert session.events_emitted == 1
        assert session.step().message == 'A state prefix "" is added to the observation table.'
        assert session.run().is_isomorphic(three_states_teacher.target)

    def test_restart_recovers_from_abort(self, scripted_teacher):
        teacher = scripted_teacher(["0"], lambda word: True,
                                   answers=[TimeoutError("no answer")])
        session = LearningSession(teacher)
        with pytest.raises(TimeoutError):
            session.run()

        session.restart()

        assert not session.aborted
        assert len(session.run()) == 1
