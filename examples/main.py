"""
main.py — Play a session in the terminal
========================================

This is the entry point. Pick a game mode and difficulty, point to
your question source, and play.

    python main.py

The runner will:
  1. Ask your source for a question
  2. Score your answer (difficulty, answer options, streak)
  3. Load the next question after a short feedback delay
  4. Stop when the game mode says the session is over
"""

import time

from trivia_engine import SessionRunner, load_settings, setup_logging
from my_source import MyQuestionSource

# ── Settings (config file, .env and TRIVIA_* variables) ──
settings = load_settings()
setup_logging(log_file_path=settings.log_file, level=settings.log_level)

# ── Game mode ──
game_mode = {"mode": "question-limited", "total_questions": 3}

# ── Create your source and play ──
runner = SessionRunner(
    game_mode=game_mode,
    source=MyQuestionSource(),
    settings=settings,
    difficulty="custom:high school biology",
    topic="Science",
)
runner.start()

while not runner.is_game_over:
    question = runner.current_question
    print(f"\n{question.question}")
    for i, option in enumerate(question.answers, start=1):
        print(f"  {i}. {option.text}")

    choice = input("Your answer: ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= question.answer_option_count:
        print("Pick one of the numbers above.")
        continue

    feedback = runner.answer(int(choice) - 1)
    print("Correct!" if feedback["is_correct"] else "Wrong.",
          f"+{feedback['points_awarded']} (total {feedback['total_score']})")

    # A terminal has no interval timer; tick until the next question is loaded
    while not runner.is_game_over and not runner.tick().advanced:
        time.sleep(settings.tick_interval_ms / 1000)

summary = runner.summary()
print(f"\nFinal score: {summary.total_score}, grade {summary.grade}")
