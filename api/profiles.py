from __future__ import annotations

from flask import Blueprint, request, jsonify, abort, current_app

from models import storage
from models.profile import Profile
from models.schemas.profile import ProfileCreateSchema, ProfileUpdateSchema, ProfileOutSchema
from utils.decorators import jwt_required, current_identity

bp = Blueprint("profiles", __name__)

profile_create_schema = ProfileCreateSchema()
profile_update_schema = ProfileUpdateSchema()
profile_out_schema = ProfileOutSchema()


@bp.post("/profiles/me")
@jwt_required()
def create_profile():
    """
    Create the authenticated user's profile
    ---
    tags:
      - Profiles
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
            description: { type: string }
            profile_picture: { type: string, format: uri }
    responses:
      201: { description: Created }
      409: { description: Profile already exists }
      422: { description: Validation error }
    """
    username = current_identity().username
    payload = request.get_json(silent=True) or {}
    data = profile_create_schema.load(payload)

    if storage.get(Profile, username):
        abort(409, description="Profile already exists")

    profile = Profile(
        username=username,
        description=data["description"],
        profile_picture=data["profile_picture"] or current_app.config["DEFAULT_PROFILE_PICTURE"],
    )
    profile.save()
    return jsonify({"data": profile_out_schema.dump(profile)}), 201


@bp.patch("/profiles/me")
@jwt_required()
def update_profile():
    """
    Update the authenticated user's profile (partial)
    ---
    tags:
      - Profiles
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
            description: { type: string }
            profile_picture: { type: string, format: uri }
    responses:
      200: { description: Updated }
      404: { description: No profile yet }
      422: { description: Validation error }
    """
    profile = storage.get(Profile, current_identity().username)
    if not profile:
        abort(404, description="Profile not found")

    payload = request.get_json(silent=True) or {}
    data = profile_update_schema.load(payload)
    for field in ["description", "profile_picture"]:
        if field in data:
            setattr(profile, field, data[field])

    profile.save()
    return jsonify({"data": profile_out_schema.dump(profile)})


@bp.get("/profiles/<username>")
def get_profile(username: str):
    """
    Get a user's profile
    ---
    tags:
      - Profiles
    parameters:
      - in: path
        name: username
        type: string
        required: true
    responses:
      200: { description: OK }
      404: { description: Not found }
    """
    profile = storage.get(Profile, username)
    if not profile:
        abort(404, description=f"Profile for {username} not found")
    return jsonify({"data": profile_out_schema.dump(profile)})
