from pydantic import BaseModel, field_validator

from todo_api.schemas.coerce import as_text


class ProjectIn(BaseModel):
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def trim_name(cls, value):
        return as_text(value).strip()
