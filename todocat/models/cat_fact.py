"""
Cat fact returned by the cat fact service.
"""

from pydantic import BaseModel, ConfigDict


class CatFact(BaseModel):
    """A cat fact; only the text is kept"""
    model_config = ConfigDict(frozen=True, extra="ignore", strict=True)

    text: str
