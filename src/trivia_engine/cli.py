# Area: Shared
"""
trivia_engine.cli — Command-line interface
==========================================

Small tools around the engine, plus a simulated session.

Usage:
    trivia-engine classify "custom:university physics"
    trivia-engine validate "tricky stuff"
    trivia-engine score --correct --difficulty hard --options 5 --streak 3
    trivia-engine demo --mode time-limited --time-limit-ms 30000 --seed 7

Settings can be given via:
    1. CLI flags: --config, --env-file, --log-level, --log-file
    2. A JSON config file
    3. TRIVIA_* environment variables (or a .env file)

Exit codes: 0 on success, 1 on validation failures, 2 on usage errors.
"""

import argparse
import json
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from ._difficulty import DifficultyClassifier, display_difficulty
from ._scoring import ScoreCalculator, ScoringPolicy
from ._session import DEFAULT_QUESTION_LIMIT, DEFAULT_TIME_LIMIT_MS, GameMode, build_game_mode
from ._settings import EngineSettings, load_settings
from ._shared import log_transition_error, setup_logging
from .demo_source import DemoQuestionSource
from .errors import (
    ConfigurationError,
    DifficultyLabelError,
    DifficultyValidationError,
    GameModeConfigError,
    InvalidStateTransition,
)
from .runner import SessionRunner

# Upper bound for unlimited demo sessions
DEMO_MAX_ANSWERS = 20


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="trivia-engine",
        description="Trivia session engine - difficulty, scoring and game modes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trivia-engine classify hard
  trivia-engine classify "custom:expert quantum mechanics"
  trivia-engine validate "ab"
  trivia-engine score --correct --difficulty medium --streak 2
  trivia-engine demo --mode question-limited --questions 5 --seed 1
  TRIVIA_SCORING_POLICY=tiered trivia-engine demo
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--env-file", type=str, help="Path to a .env file")
    parser.add_argument("--log-level", type=str, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", type=str, help="Write JSON-lines logs to this file")

    commands = parser.add_subparsers(dest="command", required=True)

    classify = commands.add_parser("classify", help="Show the multiplier of a difficulty label")
    classify.add_argument("label", help='e.g. "hard" or "custom:university physics"')

    validate = commands.add_parser("validate", help="Validate a custom difficulty description")
    validate.add_argument("text", help="Free-text description, without the custom: prefix")
    validate.add_argument("--topic", type=str, help="Also print example descriptions for a topic")

    score = commands.add_parser("score", help="Score a single answer")
    outcome = score.add_mutually_exclusive_group(required=True)
    outcome.add_argument("--correct", dest="is_correct", action="store_true")
    outcome.add_argument("--incorrect", dest="is_correct", action="store_false")
    score.add_argument("--difficulty", default="medium", help="Difficulty label")
    score.add_argument("--options", type=int, default=None, help="Answer options (3-5)")
    score.add_argument("--streak", type=int, default=0, help="Streak before this answer")
    score.add_argument("--remaining-ms", type=int, help="Time left on the question")
    score.add_argument("--question-ms", type=int, help="Per-question time budget")
    score.add_argument("--policy", choices=[p.value for p in ScoringPolicy])
    bonus = score.add_mutually_exclusive_group()
    bonus.add_argument("--time-bonus", dest="time_bonus", action="store_true", default=None)
    bonus.add_argument("--no-time-bonus", dest="time_bonus", action="store_false")

    demo = commands.add_parser("demo", help="Play a simulated session with demo questions")
    demo.add_argument(
        "--mode",
        default="question-limited",
        choices=["time-limited", "question-limited", "unlimited"],
    )
    demo.add_argument("--time-limit-ms", type=int, default=DEFAULT_TIME_LIMIT_MS)
    demo.add_argument("--questions", type=int, default=DEFAULT_QUESTION_LIMIT)
    demo.add_argument("--difficulty", default="medium")
    demo.add_argument("--topic", default="General Knowledge")
    demo.add_argument("--seed", type=int, help="Seed for reproducible runs")
    demo.add_argument(
        "--accuracy", type=float, default=0.7,
        help="Chance the simulated player answers correctly (0-1)",
    )
    demo.add_argument(
        "--answer-ms", type=int, default=4000,
        help="Simulated thinking time per question",
    )

    return parser


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_classify(args: argparse.Namespace, settings: EngineSettings) -> int:
    classifier = DifficultyClassifier()
    try:
        multiplier = classifier.classify(args.label)
        tier = classifier.classify_tier(args.label)
    except DifficultyLabelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_json({
        "label": args.label,
        "display": display_difficulty(args.label),
        "multiplier": multiplier,
        "tier": tier.name if tier else None,
    })
    return 0


def cmd_validate(args: argparse.Namespace, settings: EngineSettings) -> int:
    classifier = DifficultyClassifier()
    result = dict(classifier.validate(args.text))
    if args.topic is not None:
        result["examples"] = classifier.topic_suggestions(args.topic)
    _print_json(result)
    return 0 if result["is_valid"] else 1


def cmd_score(args: argparse.Namespace, settings: EngineSettings) -> int:
    policy = args.policy or settings.scoring_policy
    time_bonus = settings.time_bonus if args.time_bonus is None else args.time_bonus
    calculator = ScoreCalculator(policy=policy, time_bonus=time_bonus)

    try:
        multiplier = DifficultyClassifier().classify(args.difficulty)
        result = calculator.compute_score(
            is_correct=args.is_correct,
            difficulty_multiplier=multiplier,
            answer_option_count=(
                settings.answer_option_count if args.options is None else args.options
            ),
            current_streak=args.streak,
            remaining_time_ms=args.remaining_ms,
            question_time_ms=(
                settings.question_time_ms if args.question_ms is None else args.question_ms
            ),
        )
    except DifficultyLabelError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: invalid score input:\n{e}", file=sys.stderr)
        return 1

    _print_json({
        "policy": calculator.policy.value,
        "difficulty_multiplier": multiplier,
        "points_awarded": result.points_awarded,
        "time_bonus": result.time_bonus,
        "new_streak": result.new_streak,
    })
    return 0


def cmd_demo(args: argparse.Namespace, settings: EngineSettings) -> int:
    rng = random.Random(args.seed)
    now = [0]

    try:
        game_mode = build_game_mode(args.mode, args.time_limit_ms, args.questions)
        runner = SessionRunner(
            game_mode=game_mode,
            source=DemoQuestionSource(settings.answer_option_count, seed=args.seed),
            settings=settings,
            clock=lambda: now[0],
            difficulty=args.difficulty,
            topic=args.topic,
        )
    except DifficultyValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        for suggestion in e.suggestions:
            print(f"  - {suggestion}", file=sys.stderr)
        return 1
    except (DifficultyLabelError, GameModeConfigError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{runner.controller.mode.value} session on {args.topic!r}, "
          f"{display_difficulty(runner.difficulty_label)} "
          f"(x{runner.difficulty_multiplier})")

    try:
        _play(runner, rng, args, settings, now)
    except InvalidStateTransition as e:
        log_transition_error(e)
        return 1

    summary = runner.summary()
    print()
    print(f"Game over: {runner.controller.game_over_reason.value}")
    print(f"Score:     {summary.total_score}")
    print(f"Correct:   {summary.correct_answers}/{summary.questions} "
          f"({summary.accuracy:.0f}%, grade {summary.grade})")
    print(f"Best streak: {summary.best_streak}")
    return 0


def _advance(runner: SessionRunner, now: List[int], duration_ms: int, step_ms: int) -> bool:
    """Tick the runner through ``duration_ms``; True if a question was loaded."""
    advanced = False
    elapsed = 0
    while elapsed < duration_ms and not runner.is_game_over:
        step = min(step_ms, duration_ms - elapsed)
        now[0] += step
        elapsed += step
        outcome = runner.tick()
        if outcome.cue is not None:
            print(f"  [{outcome.cue.value}] {runner.controller.remaining_ms} ms left")
        advanced = advanced or outcome.advanced
    return advanced


def _play(
    runner: SessionRunner,
    rng: random.Random,
    args: argparse.Namespace,
    settings: EngineSettings,
    now: List[int],
) -> None:
    step = settings.tick_interval_ms
    runner.start()

    while not runner.is_game_over:
        question = runner.current_question
        print()
        print(f"Q{len(runner.scoreboard.history) + 1}: {question.question}")
        for i, option in enumerate(question.answers):
            print(f"  {i + 1}. {option.text}")

        _advance(runner, now, args.answer_ms, step)
        if runner.is_game_over:
            break

        if rng.random() < args.accuracy:
            choice = question.correct_index
        else:
            wrong = [i for i in range(question.answer_option_count) if i != question.correct_index]
            choice = rng.choice(wrong)

        feedback = runner.answer(choice)
        verdict = "correct" if feedback["is_correct"] else "wrong"
        print(f"  -> {choice + 1}: {verdict}, +{feedback['points_awarded']} "
              f"(total {feedback['total_score']}, streak {feedback['streak']})")

        if runner.is_game_over:
            break
        if (runner.controller.mode is GameMode.UNLIMITED
                and len(runner.scoreboard.history) >= DEMO_MAX_ANSWERS):
            runner.end()
            break

        # Wait out the feedback delay until the next question loads
        while not runner.is_game_over:
            if _advance(runner, now, step, step):
                break


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            config_path=args.config,
            env_file=args.env_file,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=settings.log_file, level=settings.log_level)

    handlers = {
        "classify": cmd_classify,
        "validate": cmd_validate,
        "score": cmd_score,
        "demo": cmd_demo,
    }
    return handlers[args.command](args, settings)
