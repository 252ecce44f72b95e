from models.base_model import Base, BaseModel
from sqlalchemy import Column, String, CheckConstraint
from sqlalchemy.orm import relationship


class User(BaseModel, Base):
    __tablename__ = "users"
    username = Column(String(64), primary_key=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    posts = relationship(
        "Post",
        back_populates="author_user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Post.id",
    )
    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("username <> ''", name="ck_users_username_not_empty"),
    )

    def __repr__(self):
        return f"<User {self.username}>"
