"""
Author Pydantic Schemas

These schemas define the shape of author data held by the library store
and handed to the GraphQL layer.

Schema roles:
- AuthorBase: the name fields every author carries
- AuthorRecord: what the store keeps (immutable)
- AuthorDraft: what a caller supplies to create an author
- AuthorView: the derived read view (positional id + full name)
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthorBase(BaseModel):
    """
    Base schema with shared author fields.

    Contains the fields common to records, drafts, and views.
    """

    firstname: str = Field(
        ...,
        description="Author's first name",
        examples=["J.K.", "Michael"],
    )

    lastname: str = Field(
        ...,
        description="Author's last name",
        examples=["Rowling", "Crichton"],
    )


class AuthorRecord(AuthorBase):
    """
    Stored author record.

    Frozen so a record handed out by the store can never be edited
    in place; the collection only ever grows by appending.
    """

    model_config = ConfigDict(frozen=True)


class AuthorDraft(AuthorBase):
    """
    Fields supplied when creating a new author.

    No extra rules apply beyond the field types.
    """

    def to_record(self) -> AuthorRecord:
        """Build the record the store will keep."""
        return AuthorRecord(firstname=self.firstname, lastname=self.lastname)


class AuthorView(AuthorBase):
    """
    Derived author view returned by the store.

    `id` is the author's position in the collection and `name` is
    firstname and lastname joined by a single space.
    """

    id: int = Field(
        ...,
        description="Position of the author in the collection",
        examples=[0, 1],
    )

    name: str = Field(
        ...,
        description="Full name (firstname + ' ' + lastname)",
        examples=["J.K. Rowling"],
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 0,
                "firstname": "J.K.",
                "lastname": "Rowling",
                "name": "J.K. Rowling",
            }
        },
    )

    @classmethod
    def from_record(cls, index: int, record: AuthorRecord) -> "AuthorView":
        """Derive the view for the record stored at `index`."""
        return cls(
            id=index,
            firstname=record.firstname,
            lastname=record.lastname,
            name=f"{record.firstname} {record.lastname}",
        )
