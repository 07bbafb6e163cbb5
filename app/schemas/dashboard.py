"""
Request bodies for dashboard actions.
"""

from pydantic import BaseModel


class StudentMessage(BaseModel):
    message: str


class ChatQuery(BaseModel):
    query: str
