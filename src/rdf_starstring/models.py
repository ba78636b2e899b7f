"""
Wire records exchanged with callers.
"""

from typing import Optional

from pydantic import BaseModel, Field


class StringQuad(BaseModel):
    """A quad with each position in string form. A missing graph means the default graph."""
    subject: str = Field(..., description="Subject term string")
    predicate: str = Field(..., description="Predicate term string")
    object: str = Field(..., description="Object term string")
    graph: Optional[str] = Field(default=None, description="Graph term string, '' for the default graph")
