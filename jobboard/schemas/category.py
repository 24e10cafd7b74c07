from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class CategoryCreate(BaseModel):
    name: str
    slug: str
    icon: Optional[str] = None


class CategoryResponse(CategoryCreate):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
