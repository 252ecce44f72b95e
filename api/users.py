from __future__ import annotations

from flask import Blueprint, jsonify, abort

from models import storage
from models.post import Post
from models.user import User
from models.schemas.post import PostOutSchema
from models.schemas.user import UserOutSchema
from utils.decorators import jwt_required, current_identity

bp = Blueprint("users", __name__)

user_out_schema = UserOutSchema()
posts_out_schema = PostOutSchema(many=True)


def get_user_or_404(username: str) -> User:
    user = storage.get(User, username)
    if not user:
        abort(404, description=f"User {username} not found")
    return user


@bp.get("/me")
@jwt_required()
def me():
    """
    Get the authenticated user
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
    user = get_user_or_404(current_identity().username)
    return jsonify({"data": user_out_schema.dump(user)}), 200


@bp.get("/users/<username>")
def get_user(username: str):
    """
    Get a user by username
    ---
    tags:
      - Users
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    user = get_user_or_404(username)
    return jsonify({"data": user_out_schema.dump(user)}), 200


@bp.get("/users/<username>/posts")
def list_user_posts(username: str):
    """
    List every post written by a user, oldest first
    ---
    tags:
      - Users
      - Posts
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      200: { description: OK }
    """
    session = storage.get_session()
    rows = session.query(Post).filter(Post.author == username).order_by(Post.id.asc()).all()
    return jsonify({"data": posts_out_schema.dump(rows)}), 200
