import logging
from flask import Flask, request, jsonify
from flask_cors import CORS

import quizapi
from config import load_config
from firebase_auth import configure_firebase, token_required

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def create_app(config=None):
    """
    Build the Flask app.

    Without an explicit config the environment is read and validated. The
    Firebase Admin app and the Gemini model are created here, once, unless
    the config sets TESTING.
    """
    app = Flask(__name__)
    app.config.update(config if config is not None else load_config())

    CORS(
        app,
        origins=[app.config["ALLOWED_ORIGIN"]],
        methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        supports_credentials=app.config.get("CORS_ALLOW_CREDENTIALS", False),
    )

    if not app.config.get("TESTING"):
        configure_firebase(app.config["FIREBASE_SERVICE_ACCOUNT"])
        quizapi.configure_gemini(app.config["GEMINI_API_KEY"], app.config["GEMINI_MODEL"])

    @app.route("/", methods=["GET"])
    def home():
        return jsonify({"message": "Welcome to the Quiz Generator API"})

    @app.route("/gemini", methods=["POST"])
    @token_required
    def gemini():
        data = request.get_json(silent=True)
        topic = data.get("topic") if isinstance(data, dict) else None

        try:
            response_text = quizapi.generate_quiz_text(
                topic, explanations=app.config.get("QUIZ_EXPLANATIONS", False)
            )
            try:
                quiz_data = quizapi.parse_quiz(response_text)
            except quizapi.MalformedQuizError:
                return jsonify({"error": "There was an error with gemini's response."}), 500
            return jsonify({"quiz": quiz_data}), 200

        except Exception:
            logger.exception("Error generating quiz for topic %r", topic)
            return jsonify({"error": "Failed to generate quiz"}), 500

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app = create_app()
    port = app.config["PORT"]
    logger.info("Server running on http://localhost:%s", port)
    app.run(host="0.0.0.0", port=port)
