from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from todo_api.schemas.coerce import as_text, is_truthy, only_bool, only_string


class TodoBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TodoCreate(TodoBase):
    title: str = ""
    completed: bool = False
    due_date: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def trim_title(cls, value):
        return as_text(value).strip()

    @field_validator("completed", mode="before")
    @classmethod
    def coerce_completed(cls, value):
        return is_truthy(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def drop_non_string_due_date(cls, value):
        return only_string(value)


class TodoUpdate(TodoBase):
    """Partial update. A field of the wrong type counts as not supplied."""

    title: Optional[str] = None
    completed: Optional[bool] = None
    due_date: Optional[str] = None

    @field_validator("title", "due_date", mode="before")
    @classmethod
    def keep_strings(cls, value):
        return only_string(value)

    @field_validator("completed", mode="before")
    @classmethod
    def keep_booleans(cls, value):
        return only_bool(value)

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)
