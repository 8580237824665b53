"""
Book Pydantic Schemas

A book references its author by position in the author collection
rather than embedding the author.
"""

from typing import NewType

from pydantic import BaseModel, ConfigDict, Field

# Position of an author in the store's author collection.
AuthorIndex = NewType("AuthorIndex", int)


class BookRecord(BaseModel):
    """
    Stored book record.

    Frozen, with chapters kept as a tuple, so a copy handed to a
    caller shares nothing that can be mutated.
    """

    title: str = Field(
        ...,
        description="Book title (unique)",
        examples=["Jurassic Park"],
    )

    author: AuthorIndex = Field(
        ...,
        description="Index of the author in the author collection",
        examples=[0, 1],
    )

    chapters: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Ordered chapter titles",
        examples=[("Intro", "The Story", "Outro")],
    )

    model_config = ConfigDict(frozen=True)
