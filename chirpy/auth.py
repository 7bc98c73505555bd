"""
Authentication blueprint:
- POST /login       email + password -> access token and refresh token
- POST /refresh     Bearer <refresh token> -> new access token
- POST /revoke      Bearer <refresh token> -> 204
- POST /revoke_all  Bearer <access token> -> 204, ends every session of the user

Access tokens are short-lived HS256 JWTs and are never stored. Refresh tokens
are opaque, stored in the refresh_tokens table and are not rotated on use.
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify, g

from models.schemas.user import UserLoginSchema, UserOutSchema
from utils.credentials import get_bearer_token
from utils.decorators import get_session_manager, jwt_required

bp = Blueprint("auth", __name__)

user_login_schema = UserLoginSchema()
user_out_schema = UserOutSchema()


@bp.post("/login")
def login():
    """
    Login: return access token and refresh token
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      -  in: body
         name: body
         schema:
           type: object
           properties:
             email: { type: string }
             password: { type: string }
             expires_in_seconds: { type: integer }
    responses:
      200:
        description: OK (returns tokens)
      401:
        description: Unauthorized
      404:
        description: No such user
    """
    payload = request.get_json(silent=True) or {}
    data = user_login_schema.load(payload)

    result = get_session_manager().login(
        data["email"], data["password"], data.get("expires_in_seconds")
    )
    body = user_out_schema.dump(result.user)
    body["token"] = result.token
    body["refresh_token"] = result.refresh_token
    return jsonify(body), 200


@bp.post("/refresh")
def refresh():
    """
    Exchange a refresh token for a new access token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      200:
        description: OK (returns a new access token)
      401:
        description: Unauthorized
    """
    refresh_token = get_bearer_token(request.headers)
    token = get_session_manager().refresh(refresh_token)
    return jsonify({"token": token}), 200


@bp.post("/revoke")
def revoke():
    """
    Revoke a refresh token
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: ""
      401:
        description: Unauthorized
    """
    refresh_token = get_bearer_token(request.headers)
    get_session_manager().revoke(refresh_token)
    return ("", 204)


@bp.post("/revoke_all")
@jwt_required()
def revoke_all():
    """
    Revoke every refresh token of the authenticated user
    ---
    tags:
      - Auth
    security:
      - Bearer: []
    responses:
      204:
        description: ""
      401:
        description: Unauthorized
    """
    get_session_manager().revoke_all(g.current_user_id)
    return ("", 204)
