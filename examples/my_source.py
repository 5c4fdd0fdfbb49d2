"""
my_source.py — YOUR QUESTION SOURCE
===================================

This is the ONLY file you need to edit.

Implement get_question() below. It receives the topic and difficulty
label the player chose and returns one multiple-choice question.

The engine handles everything else: game modes, timing, scoring,
streaks, and the delay before the next question.

You can use any libraries you want (OpenAI, Anthropic, a database,
etc.) to produce the questions.
"""

from trivia_engine import QuestionSource


class MyQuestionSource(QuestionSource):

    def get_question(self, topic, difficulty):
        """
        Called every time the session needs a new question.

        topic:      e.g. "Science"
        difficulty: "easy", "medium", "hard" or "custom:<free text>"
        """
        # ─── YOUR LOGIC HERE ───
        # Example: hardcoded question
        return {
            "question": f"Which of these is a {topic} term?",
            "answers": [
                {"text": "Photosynthesis", "is_correct": True},
                {"text": "Offside", "is_correct": False},
                {"text": "Crescendo", "is_correct": False},
                {"text": "Checkmate", "is_correct": False},
            ],
            "topic": topic,
            "difficulty": difficulty,
        }

        # ─── OR: use an LLM ───
        # response = client.messages.create(
        #     model=...,
        #     messages=[{"role": "user",
        #                "content": f"One {difficulty} question about {topic} as JSON"}]
        # )
        # return json.loads(response.content[0].text)
