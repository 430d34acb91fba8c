"""
To-do item returned by the to-do service.
"""

from pydantic import BaseModel, ConfigDict


class TodoItem(BaseModel):
    """A to-do entry; only the title is kept"""
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    title: str
