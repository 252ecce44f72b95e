"""
Follow graph endpoints:
- POST   /follow/<username>
- DELETE /unfollow/<username>
- GET    /users/<username>/followers
- GET    /users/<username>/following
"""
from __future__ import annotations

import logging

from flask import Blueprint, jsonify, abort

from models import storage
from models.user import User
from models.user_follow import UserFollow
from models.schemas.follow import FollowOutSchema
from models.schemas.user import UserOutSchema
from utils.decorators import jwt_required, current_identity

logger = logging.getLogger(__name__)

bp = Blueprint("follows", __name__)

follow_out_schema = FollowOutSchema()
users_out_schema = UserOutSchema(many=True)


@bp.post("/follow/<username>")
@jwt_required()
def follow(username: str):
    """
    Follow a user
    ---
    tags:
      - Follows
    security:
      - Bearer: []
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      201: { description: Now following }
      400: { description: Cannot follow yourself }
      404: { description: No such user }
      409: { description: Already following }
    """
    follower = current_identity().username
    if follower == username:
        abort(400, description="You cannot follow yourself")
    if not storage.get(User, username):
        abort(404, description=f"User {username} not found")
    if storage.get(UserFollow, (follower, username)):
        abort(409, description=f"Already following {username}")

    f = UserFollow(follower_username=follower, followed_username=username)
    f.save()
    logger.info("%s followed %s", follower, username)
    return jsonify({"data": follow_out_schema.dump(f)}), 201


@bp.delete("/unfollow/<username>")
@jwt_required()
def unfollow(username: str):
    """
    Stop following a user
    ---
    tags:
      - Follows
    security:
      - Bearer: []
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      200: { description: Follow removed }
      404: { description: Not following this user }
    """
    follower = current_identity().username
    f = storage.get(UserFollow, (follower, username))
    if not f:
        abort(404, description=f"Not following {username}")

    data = follow_out_schema.dump(f)
    f.delete()
    storage.save()
    return jsonify({"data": data}), 200


def _related_users(username: str, column, other_column):
    session = storage.get_session()
    return (
        session.query(User)
        .join(UserFollow, other_column == User.username)
        .filter(column == username)
        .order_by(User.username.asc())
        .all()
    )


@bp.get("/users/<username>/followers")
def list_followers(username: str):
    """
    Users following <username>
    ---
    tags:
      - Follows
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      200: { description: OK }
    """
    rows = _related_users(username, UserFollow.followed_username, UserFollow.follower_username)
    return jsonify({"data": users_out_schema.dump(rows)}), 200


@bp.get("/users/<username>/following")
def list_following(username: str):
    """
    Users that <username> follows
    ---
    tags:
      - Follows
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      200: { description: OK }
    """
    rows = _related_users(username, UserFollow.follower_username, UserFollow.followed_username)
    return jsonify({"data": users_out_schema.dump(rows)}), 200
