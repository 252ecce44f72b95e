"""
Authentication blueprint:
- POST /register
- POST /login

Passwords are hashed with argon2 (utils.security). Login returns a signed
session token valid for JWT_TOKEN_EXPIRES; there is no refresh or logout,
clients log in again once it expires.
"""
from __future__ import annotations

import logging

from flask import Blueprint, request, jsonify, abort

from models import storage
from models.user import User
from models.schemas.user import UserCreateSchema, UserOutSchema, UserLoginSchema

from utils.decorators import get_token_codec
from utils.security import hash_password, verify_password, SigningError

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)

user_create_schema = UserCreateSchema()
user_out_schema = UserOutSchema()
user_login_schema = UserLoginSchema()


@bp.post("/register")
def register():
    """
    Register a new user.
    ---
    tags:
      - Auth
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required: [username, email, password]
          properties:
            username: { type: string }
            email: { type: string }
            password: { type: string, minLength: 8 }
    responses:
      201:
        description: Created
      409:
        description: Username or email already registered
      422:
        description: Validation error
    """
    payload = request.get_json(silent=True) or {}
    data = user_create_schema.load(payload)

    session = storage.get_session()
    if storage.get(User, data["username"]):
        abort(409, description="Username already taken")
    if session.query(User).filter(User.email == data["email"]).first():
        abort(409, description="Email already registered")

    user = User(
        username=data["username"],
        email=data["email"],
        password_hash=hash_password(data["password"]),
    )
    user.save()
    logger.info("Registered user %s", user.username)

    return jsonify({"data": user_out_schema.dump(user)}), 201


@bp.post("/login")
def login():
    """
    Login: returns a bearer token
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
             username: { type: string }
             password: { type: string }
    responses:
      200:
        description: OK (returns the user and a token)
      401:
        description: Unauthorized
    """
    payload = request.get_json(silent=True) or {}
    data = user_login_schema.load(payload)

    user = storage.get(User, data["username"])
    if not user or not verify_password(data["password"], user.password_hash):
        abort(401, description="Invalid credentials")

    codec = get_token_codec()
    try:
        token = codec.issue(user.username)
    except SigningError:
        logger.exception("Cannot create token for %s", user.username)
        abort(500, description="Failed to generate token")

    return jsonify(
        {
            "data": {
                "user": user_out_schema.dump(user),
                "token": token,
                "token_type": "bearer",
                "expires_in": int(codec.settings.lifetime.total_seconds()),
            }
        }
    ), 200
