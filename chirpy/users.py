from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, g, abort, current_app

from models import storage
from models.schemas.user import UserCreateSchema, UserOutSchema
from utils.decorators import get_session_manager, jwt_required

logger = logging.getLogger(__name__)

bp = Blueprint("users", __name__)

user_create_schema = UserCreateSchema()
user_out_schema = UserOutSchema()


@bp.post("/users")
def register():
    """
    register a new user (dev platform only).
    ---
    tags:
      - Users
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      201:
        description: Created
      403:
        description: Registration disabled on this platform
      409:
        description: Email already registered
      422:
        description: Validation error
    """
    if current_app.config.get("PLATFORM") != "dev":
        logger.warning("Registration attempted on platform %r", current_app.config.get("PLATFORM"))
        abort(403, description="Registration is only available in dev mode")

    payload = request.get_json(silent=True) or {}
    data = user_create_schema.load(payload)

    if storage.get_user_by_email(data["email"]) is not None:
        abort(409, description="Email already registered")

    user = get_session_manager().register(data["email"], data["password"])
    return jsonify(user_out_schema.dump(user)), 201


@bp.get("/users/me")
@jwt_required()
def me():
    """
    Get current user info.
    ---
    tags:
      - Users
    security:
      - Bearer: []
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
    """
    user = get_session_manager().current_user(g.current_user_id)
    return jsonify(user_out_schema.dump(user)), 200


@bp.put("/users")
@jwt_required()
def update_me():
    """
    Change email and password; every refresh token of the user is revoked.
    ---
    tags:
      - Users
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            email: { type: string }
            password: { type: string }
    responses:
      200:
        description: OK
      401:
        description: Unauthorized
      409:
        description: Email already registered
    """
    payload = request.get_json(silent=True) or {}
    data = user_create_schema.load(payload)

    user = get_session_manager().update_credentials(
        g.current_user_id, data["email"], data["password"]
    )
    return jsonify(user_out_schema.dump(user)), 200
