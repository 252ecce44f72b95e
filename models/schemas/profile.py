from marshmallow import Schema, fields, validate


class ProfileCreateSchema(Schema):
    description = fields.String(load_default="", validate=validate.Length(max=2000))
    profile_picture = fields.Url(allow_none=True, load_default=None)


class ProfileUpdateSchema(Schema):
    description = fields.String(validate=validate.Length(max=2000))
    profile_picture = fields.Url()


class ProfileOutSchema(Schema):
    username = fields.String()
    description = fields.String()
    profile_picture = fields.String(allow_none=True)
