VALID_TOKEN = "valid-token"

EXAMPLE_REPLY = (
    "```json\n"
    '[{"question": "Which planet is known as the \'Red Planet\'?", "options": ["Earth", "Mars", "Jupiter", "Venus"], "correctAnswer": "Mars"}, '
    '{"question": "What is the capital of France?", "options": ["London", "Berlin", "Paris", "Rome"], "correctAnswer": "Paris"}]\n'
    "```"
)


class FakeResponse:
    def __init__(self, text):
        self.text = text


class FakeChat:
    def __init__(self, model, history):
        self.model = model
        self.history = history

    def send_message(self, prompt):
        self.model.prompts.append(prompt)
        if self.model.error is not None:
            raise self.model.error
        return FakeResponse(self.model.reply)


class FakeModel:
    """Stands in for genai.GenerativeModel and records every prompt sent."""

    def __init__(self, reply=EXAMPLE_REPLY, error=None):
        self.reply = reply
        self.error = error
        self.prompts = []
        self.histories = []

    def start_chat(self, history=None):
        self.histories.append(history)
        return FakeChat(self, history)


EXPECTED_QUIZ = [
    {
        "question": "Which planet is known as the 'Red Planet'?",
        "options": ["Earth", "Mars", "Jupiter", "Venus"],
        "correctAnswer": "Mars",
    },
    {
        "question": "What is the capital of France?",
        "options": ["London", "Berlin", "Paris", "Rome"],
        "correctAnswer": "Paris",
    },
]
