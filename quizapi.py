import re
import json
import logging
import google.generativeai as genai

logger = logging.getLogger(__name__)

CHAT_HISTORY = [
    {"role": "user", "parts": ["Hello"]},
    {"role": "model", "parts": ["Great to meet you. What would you like to know?"]},
]

QUESTION_SHAPE = '{ "question": "the question string", "options": ["option 1", "option 2", "option 3", "option 4"], "correctAnswer": "the correct answer" }'
QUESTION_SHAPE_WITH_EXPLANATION = '{ "question": "the question string", "options": ["option 1", "option 2", "option 3", "option 4"], "correctAnswer": "the correct answer", "explanation": "why the correct answer is right" }'

EXAMPLE_QUIZ = (
    '[ {  "question": "Which planet is known as the \'Red Planet\'?",  "options": ["Earth", "Mars", "Jupiter", "Venus"], "correctAnswer": "Mars" }, '
    '{ "question": "What is the capital of France?",    "options": ["London", "Berlin", "Paris", "Rome"], "correctAnswer": "Paris" } ]'
)
EXAMPLE_QUIZ_WITH_EXPLANATION = (
    '[ {  "question": "Which planet is known as the \'Red Planet\'?",  "options": ["Earth", "Mars", "Jupiter", "Venus"], "correctAnswer": "Mars", '
    '"explanation": "Iron oxide on its surface gives Mars a reddish appearance." }, '
    '{ "question": "What is the capital of France?",    "options": ["London", "Berlin", "Paris", "Rome"], "correctAnswer": "Paris", '
    '"explanation": "Paris has been the capital of France since the 10th century." } ]'
)

FENCE_PATTERN = re.compile(r"```json\s*|```")

_model = None


class MalformedQuizError(ValueError):
    """Gemini answered, but the cleaned reply is not valid JSON."""


def configure_gemini(api_key, model_name):
    """Create or reuse the process-wide Gemini model."""
    global _model
    if _model is None:
        genai.configure(api_key=api_key)
        _model = genai.GenerativeModel(model_name)
        logger.info("Gemini model %s configured", model_name)
    return _model


def get_model():
    if _model is None:
        raise RuntimeError("Gemini model is not configured. Call configure_gemini first.")
    return _model


def build_prompt(topic, explanations=False):
    if explanations:
        return (
            f"Generate 5 multiple-choice quiz questions about {topic}. Each question should have 4 possible answer choices. "
            f"Return the results as a JSON array of objects. Each object should have the following structure: {QUESTION_SHAPE_WITH_EXPLANATION}\n"
            "Make sure that only one correct answer is provided in the options array for every question.\n"
            "Every question must include a short explanation of the correct answer. "
            "If a question, option or explanation contains code, wrap the code in triple backticks (```).\n"
            f"For example:  {EXAMPLE_QUIZ_WITH_EXPLANATION}"
        )
    return (
        f"Generate 5 multiple-choice quiz questions about {topic}. Each question should have 4 possible answer choices. "
        f"Return the results as a JSON array of objects. Each object should have the following structure: {QUESTION_SHAPE}\n"
        "Make sure that only one correct answer is provided in the options array for every question.\n"
        f"For example:  {EXAMPLE_QUIZ}"
    )


def generate_quiz_text(topic, explanations=False, model=None):
    """Send the quiz prompt through a fresh chat and return Gemini's full reply text."""
    model = model or get_model()
    chat = model.start_chat(history=list(CHAT_HISTORY))
    response = chat.send_message(build_prompt(topic, explanations))
    return response.text


def clean_response(text):
    """Remove every ```json / ``` fence marker Gemini wraps around its JSON."""
    return FENCE_PATTERN.sub("", text)


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def parse_quiz(text):
    cleaned = clean_response(text)
    try:
        # NaN and Infinity would produce a response body no JSON client can read
        return json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error("Error while parsing json, check the response of Gemini: %s\nRaw response: %s", e, text)
        raise MalformedQuizError(str(e)) from e
