import logging
from typing import Any, Dict

from flask import Blueprint, jsonify, request, session

from models.user import Provider, User, db
from utils.errors import ConflictError, NotFoundError, UnauthorizedError, ValidationError

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__)

SESSION_KEY = "user"


def _body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def current_identity() -> Dict[str, Any]:
    identity = session.get(SESSION_KEY)
    if not identity or not identity.get("id"):
        raise UnauthorizedError()
    return identity


def _current_user() -> User:
    user = db.session.get(User, current_identity()["id"])
    if user is None:
        raise NotFoundError("User not found")
    return user


@bp.route("/api/register", methods=["POST"])
def register():
    data = _body()
    full_name, email, password = data.get("fullName"), data.get("email"), data.get("password")
    if not full_name or not email or not password:
        raise ValidationError("Missing required fields")
    if User.query.filter_by(email=email).first():
        raise ConflictError("User with this email already exists")
    user = User(full_name=full_name, email=email, provider=Provider.CREDENTIALS)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    logger.info("Registered user %s", user.id)
    return jsonify({"id": user.id, "fullName": user.full_name, "email": user.email}), 201


@bp.route("/api/auth/signin", methods=["POST"])
def signin():
    data = _body()
    email, password = data.get("email"), data.get("password")
    if not email or not password:
        raise ValidationError("Missing required fields")
    user = User.query.filter_by(email=email).first()
    if user is None or not user.check_password(password):
        raise UnauthorizedError("Invalid email or password")
    session.clear()
    session[SESSION_KEY] = user.identity()
    return jsonify({"success": True, "user": user.identity()})


@bp.route("/api/auth/signout", methods=["POST"])
def signout():
    session.clear()
    return jsonify({"success": True})


@bp.route("/api/auth/sync-user", methods=["GET"])
def sync_user():
    identity = current_identity()
    user = db.session.get(User, identity["id"])
    if user is None:
        provider = identity.get("provider") or Provider.CREDENTIALS.value
        user = User(
            id=identity["id"],
            email=identity.get("email") or "",
            full_name=identity.get("fullName") or "User",
            provider=Provider(provider),
            image=identity.get("image"),
        )
        db.session.add(user)
        db.session.commit()
        logger.info("Created user %s from session", user.id)
    return jsonify({"success": True, "user": user.to_dict()})


@bp.route("/api/user/profile", methods=["GET"])
def get_profile():
    return jsonify(_current_user().to_dict())


@bp.route("/api/user/profile", methods=["PUT"])
def update_profile():
    user = _current_user()
    data = _body()
    if "fullName" in data and not data["fullName"]:
        raise ValidationError("fullName cannot be empty")
    user.update_profile(data)
    db.session.commit()
    session[SESSION_KEY] = user.identity()
    return jsonify(user.to_dict())
