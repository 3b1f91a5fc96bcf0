from functools import wraps

from flask import request, jsonify

from models import db
from models.users import User
from utils.tokens import decode_jwt


ACCESS_TOKEN_COOKIE = "access_token"


def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.cookies.get(ACCESS_TOKEN_COOKIE)
        if not token:
            return jsonify({"error": "Unauthorized"}), 401

        decoded = decode_jwt(token)
        if not decoded or not decoded.get("user_id"):
            return jsonify({"error": "Invalid token"}), 401

        return f(*args, **kwargs)

    return decorated_function


def get_current_user():
    """Return the logged-in User for this request, or None.

    Unlike login_required this never rejects the request: anonymous callers
    simply have no user.
    """
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if not token:
        return None

    decoded = decode_jwt(token)
    if not decoded:
        return None

    user_id = decoded.get("user_id")
    if user_id is None:
        return None
    return db.session.get(User, user_id)
