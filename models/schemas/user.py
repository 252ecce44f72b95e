from marshmallow import Schema, fields, pre_load, validates, validate, ValidationError

from models.schemas.common import norm_email, validate_not_blank


class UserCreateSchema(Schema):
    username = fields.String(required=True, validate=[validate.Length(max=64), validate_not_blank])
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True)

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "email" in data:
            data["email"] = norm_email(data["email"])
        return data

    @validates("password")
    def validate_password(self, value, **kwargs):
        if len(value) < 8:
            raise ValidationError("Password must be at least 8 characters long.")


class UserLoginSchema(Schema):
    username = fields.String(required=True)
    password = fields.String(required=True, load_only=True)


class UserOutSchema(Schema):
    # password_hash is never dumped
    username = fields.String()
    email = fields.String()
