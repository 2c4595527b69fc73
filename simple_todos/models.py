"""Pydantic models for the todo list.

Field aliases match the persisted JSON layout (``createdAt``, ``anyCompleted``).
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from simple_todos import __version__


class Filter(StrEnum):
    """Which subset of the collection is displayed."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"


class Task(BaseModel):
    """A task record in the todo list."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Unique identifier for the task")
    title: str = Field(..., description="The task title")
    completed: bool = Field(default=False, description="Whether the task has been completed")
    created_at: int = Field(
        ...,
        alias="createdAt",
        description="Creation time in milliseconds since the epoch",
    )


class Projection(BaseModel):
    """The filtered listing plus summary values derived from the collection."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[Task] = Field(default_factory=list)
    remaining: int = Field(default=0, description="Number of tasks not yet completed")
    any_completed: bool = Field(
        default=False,
        alias="anyCompleted",
        description="Whether at least one task is completed",
    )


class TaskCreate(BaseModel):
    """Request body for adding a task.

    The title is not length-checked here: blank titles are a silent no-op.
    """

    title: str = Field(default="", description="The task title")


class TaskUpdate(BaseModel):
    """Request body for editing or toggling a task."""

    title: str | None = Field(default=None, description="New title for the task")
    completed: bool | None = Field(default=None, description="New completion status")


class FilterUpdate(BaseModel):
    """Request body for changing the active filter."""

    filter: Filter


class HealthResponse(BaseModel):
    """Response from the health check endpoint."""

    status: str = "healthy"
    version: str = __version__
