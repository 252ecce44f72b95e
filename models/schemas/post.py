from marshmallow import Schema, fields, validate

from models.schemas.common import validate_not_blank


class PostCreateSchema(Schema):
    title = fields.String(required=True, validate=[validate.Length(min=1, max=255), validate_not_blank])
    content = fields.String(required=True, validate=validate_not_blank)


class PostUpdateSchema(Schema):
    # All optional, but validate if present
    title = fields.String(validate=[validate.Length(min=1, max=255), validate_not_blank])
    content = fields.String(validate=validate_not_blank)


class PostOutSchema(Schema):
    id = fields.Integer()
    title = fields.String()
    content = fields.String()
    author = fields.String()
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
