from sqlalchemy import Column, String, Text, ForeignKey
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Profile(BaseModel, Base):
    __tablename__ = "profiles"

    username = Column(String(64), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True)
    description = Column(Text, nullable=False, default="")
    profile_picture = Column(String(2048), nullable=True)

    user = relationship("User", back_populates="profile")
