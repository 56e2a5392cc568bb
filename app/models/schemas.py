"""Pydantic models describing API payloads."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NotificationKind(str, Enum):
    """Type of notification sent to the delivery endpoint."""

    BROADCAST = "broadcast"
    ASSIGNMENT = "assignment"


class NotificationRequest(BaseModel):
    """Wire body accepted by the notification endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    emails: list[str]
    task_title: str = Field(alias="taskTitle")
    type: NotificationKind = NotificationKind.BROADCAST


class MessageResponse(BaseModel):
    """Generic ``{"message": ...}`` payload returned by the API."""

    message: str
    error: str | None = None


# Domain catalog schemas
class Domain(BaseModel):
    """Named skill domain with its associated technology stacks."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    stacks: list[str] = []
    created_at: str | None = Field(default=None, alias="createdAt")


class SeededDomain(Domain):
    """Domain record after it has been written to Firestore."""

    id: str


class SeedResponse(BaseModel):
    """Schema for the seed-domains API response."""

    message: str
    count: int
    domains: list[SeededDomain]
