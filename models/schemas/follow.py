from marshmallow import Schema, fields


class FollowOutSchema(Schema):
    follower_username = fields.String()
    followed_username = fields.String()
