"""
User Response DTOs

DTOs for user-related API responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRecord(BaseModel):
    """
    Response DTO for user information.

    Carries only the fields safe to expose; the stored password is never
    part of this shape.
    """

    id: int = Field(description="User ID")
    username: str = Field(description="Login name")
    email: str = Field(description="Contact email address")

    model_config = ConfigDict(
        from_attributes=True,  # Allow creation from ORM models
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "username": "alice",
                "email": "a@x.com"
            }
        },
    )
