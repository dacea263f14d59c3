import logging
from functools import wraps

import firebase_admin
from firebase_admin import credentials, auth
from flask import request, jsonify, g

logger = logging.getLogger(__name__)


def configure_firebase(service_account):
    """Initialize the default Firebase Admin app once per process."""
    if not firebase_admin._apps:
        cred = credentials.Certificate(service_account)
        firebase_admin.initialize_app(cred)
        logger.info("Firebase Admin initialized for project %s", service_account.get("project_id"))
    return firebase_admin.get_app()


def bearer_token(auth_header):
    parts = auth_header.split(" ")
    return parts[1] if len(parts) > 1 else None


def token_required(f):
    """
    Reject the request unless it carries a valid Firebase ID token.

    The decoded claims are exposed as g.user to the wrapped view.
    """
    @wraps(f)
    def decorated(*args, **kwargs):
        auth_header = request.headers.get("Authorization")
        if not auth_header:
            return jsonify({"error": "No token provided"}), 401

        token = bearer_token(auth_header)
        try:
            if not token:
                raise ValueError("Authorization header has no token")
            g.user = auth.verify_id_token(token)
        except Exception:
            logger.exception("Error while verifying token")
            return jsonify({"error": "Unauthorized"}), 401

        return f(*args, **kwargs)

    return decorated
