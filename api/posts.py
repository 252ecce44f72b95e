from __future__ import annotations

from flask import Blueprint, request, jsonify, abort

from models import storage
from models.post import Post
from models.schemas.post import PostCreateSchema, PostUpdateSchema, PostOutSchema
from utils.decorators import jwt_required, current_identity

bp = Blueprint("posts", __name__)

post_create_schema = PostCreateSchema()
post_update_schema = PostUpdateSchema()
post_out_schema = PostOutSchema()


def get_post_or_404(post_id: int) -> Post:
    post = storage.get(Post, post_id)
    if not post:
        abort(404, description=f"Post {post_id} not found")
    return post


def get_own_post(post_id: int) -> Post:
    """Load a post the caller is allowed to change."""
    post = get_post_or_404(post_id)
    if not post.is_authored_by(current_identity().username):
        abort(403, description="Only the author can modify this post")
    return post


@bp.post("/posts")
@jwt_required()
def create_post():
    """
    Create a post as the authenticated user
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, content]
          properties:
            title: { type: string, maxLength: 255 }
            content: { type: string }
    responses:
      201:
        description: Created
      401:
        description: Unauthorized
      422:
        description: Validation error
    """
    payload = request.get_json(silent=True) or {}
    data = post_create_schema.load(payload)

    post = Post(
        title=data["title"],
        content=data["content"],
        author=current_identity().username,
    )
    post.save()
    return jsonify({"data": post_out_schema.dump(post)}), 201


@bp.get("/posts/<int:post_id>")
def get_post(post_id: int):
    """
    Get a single post by id
    ---
    tags:
      - Posts
    parameters:
      - in: path
        name: post_id
        type: integer
        required: true
    responses:
      200:
        description: Post found
      404:
        description: Not found
    """
    return jsonify({"data": post_out_schema.dump(get_post_or_404(post_id))})


@bp.patch("/posts/<int:post_id>")
@jwt_required()
def update_post(post_id: int):
    """
    Update a post (partial). Only its author may do this.
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    consumes:
      - application/json
    parameters:
      - in: path
        name: post_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            title: { type: string, maxLength: 255 }
            content: { type: string }
    responses:
      200:
        description: Updated
      403:
        description: Not the author
      404:
        description: Not found
      422:
        description: Validation error
    """
    post = get_own_post(post_id)

    payload = request.get_json(silent=True) or {}
    data = post_update_schema.load(payload)

    # Missing fields keep their current value
    for field in ["title", "content"]:
        if field in data:
            setattr(post, field, data[field])

    post.save()
    return jsonify({"data": post_out_schema.dump(post)})


@bp.delete("/posts/<int:post_id>")
@jwt_required()
def delete_post(post_id: int):
    """
    Delete a post. Only its author may do this.
    ---
    tags:
      - Posts
    security:
      - Bearer: []
    parameters:
      - in: path
        name: post_id
        type: integer
        required: true
    responses:
      204:
        description: Deleted
      403:
        description: Not the author
      404:
        description: Not found
    """
    post = get_own_post(post_id)
    post.delete()
    storage.save()
    return ("", 204)
