"""
UserFollow: who follows whom.
The pair is the primary key, so following twice is a unique violation,
and the check constraint rules out following yourself.
"""
from sqlalchemy import Column, String, ForeignKey, CheckConstraint

from models.base_model import BaseModel, Base


class UserFollow(BaseModel, Base):
    __tablename__ = "user_follows"

    follower_username = Column(
        String(64), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True
    )
    followed_username = Column(
        String(64), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True
    )

    __table_args__ = (
        CheckConstraint("follower_username <> followed_username", name="ck_user_follows_no_self_follow"),
    )

    def __repr__(self):
        return f"<UserFollow {self.follower_username} -> {self.followed_username}>"
