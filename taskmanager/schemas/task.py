from pydantic import BaseModel, ConfigDict, field_validator
from typing import Optional


def _strip_title(v):
    if v is None:
        return v
    if not v.strip():
        raise ValueError("title cannot be empty")
    return v.strip()


class TaskCreate(BaseModel):
    # any owner email sent in the body is ignored; ownership comes from the token
    title: str
    description: Optional[str] = ""
    priority: Optional[str] = None
    deadline: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _strip_title(v)


class TaskUpdate(BaseModel):
    """Partial task fields. Only the fields actually sent are written."""
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    deadline: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _strip_title(v)


class TaskOut(BaseModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[str] = None
    deadline: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    user_email: str

    model_config = ConfigDict(from_attributes=True)
