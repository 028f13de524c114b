from typing import Annotated

from pydantic import BaseModel, StrictStr, StringConstraints, field_validator

from oleander.models.user import TEXT_MAX

Text = Annotated[StrictStr, StringConstraints(max_length=TEXT_MAX)]

class UserCreate(BaseModel):
    first_name: Text
    last_name: Text
    username: Text
    pwd: Text

    class Config:
        extra = "forbid"


class UserUpdate(BaseModel):
    first_name: Text | None = None
    last_name: Text | None = None
    username: Text | None = None
    pwd: Text | None = None

    @field_validator("first_name", "last_name", "username", "pwd", mode="before")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

    class Config:
        extra = "forbid"


class UserOut(BaseModel):
    id: int
    first_name: str
    last_name: str
    username: str
    pwd: str

    class Config:
        from_attributes = True
