from sqlalchemy import Column, Integer, String, Text
from taskmanager.database import Base


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    # nullable: an upsert on a missing id stores only the fields sent
    title = Column(String, nullable=True)
    description = Column(Text, nullable=True)
    priority = Column(String, nullable=True)
    deadline = Column(String, nullable=True)
    category = Column(String, nullable=True)
    status = Column(String, nullable=True)
    # references users.email by value only
    user_email = Column(String, nullable=False, index=True)
