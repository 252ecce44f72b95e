from sqlalchemy import Column, String, Integer, Text, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Post(BaseModel, Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    # Deleting a user removes their posts
    author = Column(String(64), ForeignKey("users.username", ondelete="CASCADE"), nullable=False)

    author_user = relationship("User", back_populates="posts")

    __table_args__ = (
        CheckConstraint("title <> ''", name="ck_posts_title_not_empty"),
        CheckConstraint("content <> ''", name="ck_posts_content_not_empty"),
        Index("ix_posts_author", "author"),
    )

    def is_authored_by(self, username: str) -> bool:
        return self.author == username
