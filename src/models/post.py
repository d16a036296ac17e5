"""
Blog post Pydantic models and document serialization
"""

from typing import Optional, Dict, Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class AuthorName(BaseModel):
    """Author as stored: a first/last name pair"""
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(..., alias="firstName", min_length=1)
    last_name: str = Field(..., alias="lastName", min_length=1)


class PostCreateRequest(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author: AuthorName
    created: Optional[datetime] = Field(None, description="Defaults to the creation instant")


class PostUpdateRequest(BaseModel):
    """Full replacement of a post; id must match the id in the URL"""
    id: str = Field(..., description="Id of the post being replaced")
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    author: AuthorName
    created: Optional[datetime] = None


class PostResponse(BaseModel):
    id: str
    title: str
    content: str
    author: str
    created: Optional[datetime] = None


def format_author_name(first_name: str, last_name: str) -> str:
    """Join first and last name with a single space"""
    return f"{first_name or ''} {last_name or ''}".strip()


def serialize_post(document: Dict[str, Any]) -> Dict[str, Any]:
    """Project a stored post document onto its API representation"""
    author = document.get("author") or {}
    return {
        "id": str(document["_id"]),
        "title": document.get("title"),
        "content": document.get("content"),
        "author": format_author_name(author.get("firstName"), author.get("lastName")),
        "created": document.get("created")
    }
