from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from jobboard.database import Base
import uuid


class Category(Base):
    """Job category. Jobs reference a category by slug, not by foreign key."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    icon = Column(String(100), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
