"""User request/response models."""

from typing import List

from pydantic import BaseModel, Field, field_validator


class UserEnterRequest(BaseModel):
    name: str = Field(min_length=1)
    preferences: List[str] = []

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class UserResponse(BaseModel):
    user_id: str
    name: str
    preferences: List[str]
    reading_history_count: int
    created: bool = False
