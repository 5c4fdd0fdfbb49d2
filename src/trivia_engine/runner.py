# Area: Session
"""
trivia_engine.runner — Reference session host
==============================================

The SessionRunner wires one play session together: it asks the
question source for questions, feeds answers to the mode controller,
scores them with the calculator, keeps the scoreboard, emits time cues
and performs the delayed advance to the next question.

It is what a UI would do around the engine, minus the rendering. The
CLI demo and the integration tests drive it with an injected clock.

Usage
-----
    runner = SessionRunner(
        game_mode={"mode": "question-limited", "total_questions": 5},
        source=DemoQuestionSource(),
        difficulty="custom:university physics",
        topic="Science",
    )
    runner.start()
    question = runner.current_question
    feedback = runner.answer(0)
    ...
    runner.tick()         # call every settings.tick_interval_ms
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from ._difficulty import DifficultyClassifier, format_difficulty
from ._scoring import ScoreBoard, ScoreCalculator, ScoreResult, ScoreState, SessionSummary, summarize
from ._session import (
    AdvanceScheduler,
    Directive,
    GameModeController,
    QuestionLimitedConfig,
    SessionEvent,
    TimeCue,
    TimeCueTracker,
    TimeLimitedConfig,
    UnlimitedConfig,
)
from ._settings import EngineSettings
from .demo_source import DemoQuestionSource
from .question_source import QuestionSource
from .types import AnswerFeedback, TriviaQuestion

logger = logging.getLogger("trivia_engine.runner")

DEFAULT_GAME_MODE = {"mode": "question-limited", "total_questions": 10}
DEFAULT_TOPIC = "General Knowledge"


def monotonic_ms() -> int:
    """Milliseconds from the monotonic clock."""
    return int(time.monotonic() * 1000)


@dataclass(frozen=True)
class TickOutcome:
    """
    What happened on one host tick.

    Attributes:
        directive: Directive returned by the controller
        cue: Audio cue to play, if any
        advanced: True if a new question was loaded on this tick
    """

    directive: Directive
    cue: Optional[TimeCue] = None
    advanced: bool = False


class SessionRunner:
    """
    Plays one session against a question source.

    Attributes:
        settings: Engine settings in effect
        source: Where questions come from
        controller: The game mode controller
        calculator: The score calculator
        scoreboard: Total, streak and history
        topic: Topic requested from the source
        difficulty_label: Normalised difficulty label
        difficulty_multiplier: Multiplier derived from the label
    """

    def __init__(
        self,
        game_mode: Union[
            TimeLimitedConfig, QuestionLimitedConfig, UnlimitedConfig,
            Mapping[str, Any], None,
        ] = None,
        source: Optional[QuestionSource] = None,
        settings: Optional[EngineSettings] = None,
        clock: Optional[Callable[[], int]] = None,
        difficulty: str = "medium",
        topic: str = DEFAULT_TOPIC,
        classifier: Optional[DifficultyClassifier] = None,
    ):
        self.settings = settings or EngineSettings()
        self.classifier = classifier or DifficultyClassifier()

        # Raises DifficultyLabelError / DifficultyValidationError before anything starts
        parsed = self.classifier.parse(difficulty)
        self.difficulty_label = format_difficulty(parsed)
        self.difficulty_multiplier = self.classifier.classify(parsed)
        self.topic = topic

        self.source = source or DemoQuestionSource(
            answer_option_count=self.settings.answer_option_count,
        )
        self.controller = GameModeController(
            DEFAULT_GAME_MODE if game_mode is None else game_mode,
            strict=self.settings.strict_transitions,
        )
        self.calculator = ScoreCalculator(
            policy=self.settings.scoring_policy,
            time_bonus=self.settings.time_bonus,
        )
        self.scoreboard = ScoreBoard()
        self.cues = TimeCueTracker()
        self.scheduler = AdvanceScheduler(self.settings.advance_delay_ms)

        self._clock = clock or monotonic_ms
        self._question: Optional[TriviaQuestion] = None
        self._answered = False
        self._question_started_at: Optional[int] = None
        self._paused_at: Optional[int] = None
        self._advance_on_resume = False
        self._finished_logged = False

    # ── Read-only state ───────────────────────────────────────

    @property
    def current_question(self) -> Optional[TriviaQuestion]:
        return self._question

    @property
    def answered(self) -> bool:
        """True once the current question has been answered."""
        return self._answered

    @property
    def is_game_over(self) -> bool:
        return self.controller.is_game_over

    @property
    def score(self) -> ScoreState:
        return self.scoreboard.snapshot()

    def summary(self) -> SessionSummary:
        """Statistics over every answered question so far."""
        return summarize(self.scoreboard.history)

    # ── Host operations ───────────────────────────────────────

    def start(self, now_ms: Optional[int] = None) -> Directive:
        """Start the session and load the first question."""
        now = self._now(now_ms)
        legal = self.controller.can(SessionEvent.START)
        directive = self.controller.start(now)
        if legal:
            logger.info(
                "Session on %r at %s (x%s)",
                self.topic, self.difficulty_label, self.difficulty_multiplier,
            )
            self.cues.reset()
            if directive.load_next:
                self._load_question(now)
        return directive

    def answer(self, answer_index: int, now_ms: Optional[int] = None) -> Optional[AnswerFeedback]:
        """
        Submit the player's choice for the current question.

        A second submission for the same question (or one with no
        question loaded) is ignored and returns None.

        Raises:
            IndexError: If ``answer_index`` is not an option of the question.
            InvalidStateTransition: In strict mode, if the session is not running.
        """
        question = self._question
        if question is None or self._answered:
            logger.debug("Ignoring answer %d: no open question", answer_index)
            return None

        is_correct = question.is_correct(answer_index)
        now = self._now(now_ms)
        answered_before = self.controller.progress.questions_answered

        directive = self.controller.record_answer(now)
        counted = self.controller.progress.questions_answered > answered_before

        if counted:
            self._answered = True
            remaining = self._question_remaining_ms(now)
            result = self.calculator.compute_score(
                is_correct=is_correct,
                difficulty_multiplier=self.difficulty_multiplier,
                answer_option_count=question.answer_option_count,
                current_streak=self.scoreboard.streak,
                remaining_time_ms=remaining,
                question_time_ms=self.settings.question_time_ms,
            )
            self.scoreboard.record(
                result,
                is_correct=is_correct,
                difficulty=self.difficulty_label,
                topic=question.topic,
                remaining_time_ms=remaining,
            )
        else:
            result = ScoreResult(points_awarded=0, new_streak=self.scoreboard.streak)
            if self.controller.is_game_over:
                self._answered = True

        if directive.load_next:
            self.scheduler.schedule(now)
        self._log_if_finished()

        return {
            "is_correct": is_correct,
            "correct_index": question.correct_index,
            "points_awarded": result.points_awarded,
            "total_score": self.scoreboard.total_score,
            "streak": self.scoreboard.streak,
            "should_continue": directive.should_continue,
            "load_next": directive.load_next,
            "reason": directive.reason.value if directive.reason else None,
        }

    def tick(self, now_ms: Optional[int] = None) -> TickOutcome:
        """
        Drive time forward: controller tick, time cue, delayed advance.

        Ticks while idle or paused do nothing.
        """
        if not (self.controller.is_running or self.controller.is_game_over):
            return TickOutcome(directive=self.controller.last_directive)

        now = self._now(now_ms)
        directive = self.controller.tick(now)

        cue = None
        if not self.controller.is_game_over:
            cue = self.cues.cue_for(self.controller.remaining_ms)

        advanced = self.scheduler.poll(now, self.controller.is_game_over)
        if advanced:
            self._load_question(now)
        self._log_if_finished()
        return TickOutcome(directive=directive, cue=cue, advanced=advanced)

    def pause(self, now_ms: Optional[int] = None) -> Directive:
        """Pause the session; a pending advance is held until resume."""
        now = self._now(now_ms)
        legal = self.controller.can(SessionEvent.PAUSE)
        directive = self.controller.pause(now)
        if legal and self.controller.is_paused:
            self._paused_at = now
            self._advance_on_resume = self.scheduler.is_pending
            self.scheduler.cancel()
        self._log_if_finished()
        return directive

    def resume(self, now_ms: Optional[int] = None) -> Directive:
        """Resume a paused session, excluding the pause from question time."""
        now = self._now(now_ms)
        directive = self.controller.resume(now)
        if self.controller.is_running and self._paused_at is not None:
            if self._question_started_at is not None:
                self._question_started_at += now - self._paused_at
            self._paused_at = None
            if self._advance_on_resume:
                self.scheduler.schedule(now)
                self._advance_on_resume = False
        return directive

    def end(self) -> Directive:
        """Quit the session."""
        self.scheduler.cancel()
        directive = self.controller.end()
        self._log_if_finished()
        return directive

    # ── Internals ─────────────────────────────────────────────

    def _now(self, now_ms: Optional[int]) -> int:
        return self._clock() if now_ms is None else now_ms

    def _load_question(self, now: int) -> None:
        raw = self.source.get_question(self.topic, self.difficulty_label)
        if isinstance(raw, TriviaQuestion):
            question = raw
        else:
            question = TriviaQuestion.model_validate(dict(raw))
        self._question = question
        self._answered = False
        self._question_started_at = now
        logger.debug("Loaded question: %s", question.question)

    def _question_remaining_ms(self, now: int) -> Optional[int]:
        if self._question_started_at is None:
            return None
        spent = now - self._question_started_at
        return max(0, self.settings.question_time_ms - spent)

    def _log_if_finished(self) -> None:
        if self._finished_logged or not self.controller.is_game_over:
            return
        self._finished_logged = True
        reason = self.controller.game_over_reason
        logger.info(
            "Game over (%s): score=%d correct=%d/%d",
            reason.value if reason else "unknown",
            self.scoreboard.total_score,
            self.scoreboard.correct_answers,
            len(self.scoreboard.history),
        )
