import os
import json
from dotenv import load_dotenv


DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_ORIGIN = "https://quiz-generator-gemini-ai.vercel.app"
DEFAULT_PORT = 8080

_TRUTHY = {"1", "true", "yes", "on"}


class ConfigError(RuntimeError):
    pass


def _as_bool(value):
    return str(value or "").strip().lower() in _TRUTHY


def parse_service_account(raw):
    """Decode the Firebase service account JSON blob from the environment."""
    if not raw:
        raise ConfigError("FIREBASE_ADMIN_CREDENTIALS missing. Provide the service account JSON via env.")
    try:
        service_account = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigError(f"FIREBASE_ADMIN_CREDENTIALS is not valid JSON: {e}") from e
    if not isinstance(service_account, dict):
        raise ConfigError("FIREBASE_ADMIN_CREDENTIALS must be a JSON object")

    # keys pasted into a single env line keep their newlines escaped
    if isinstance(service_account.get("private_key"), str):
        service_account["private_key"] = service_account["private_key"].replace("\\n", "\n")
    return service_account


def load_config(environ=None):
    """
    Build the Flask config mapping from environment variables.

    A .env file in the working directory is loaded first when reading from
    os.environ. Raises ConfigError when the Gemini key or the Firebase
    service account is missing or malformed, so the process fails at start-up
    rather than on the first request.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    api_key = environ.get("API_KEY")
    if not api_key:
        raise ConfigError("API_KEY missing. Provide the Gemini API key via env.")

    try:
        port = int(environ.get("PORT", DEFAULT_PORT))
    except ValueError as e:
        raise ConfigError(f"PORT must be an integer, got {environ.get('PORT')!r}") from e

    return {
        "GEMINI_API_KEY": api_key,
        "GEMINI_MODEL": environ.get("GEMINI_MODEL") or DEFAULT_MODEL,
        "FIREBASE_SERVICE_ACCOUNT": parse_service_account(environ.get("FIREBASE_ADMIN_CREDENTIALS")),
        "ALLOWED_ORIGIN": environ.get("ALLOWED_ORIGIN") or DEFAULT_ORIGIN,
        "CORS_ALLOW_CREDENTIALS": _as_bool(environ.get("CORS_ALLOW_CREDENTIALS")),
        "QUIZ_EXPLANATIONS": _as_bool(environ.get("QUIZ_EXPLANATIONS")),
        "PORT": port,
    }
