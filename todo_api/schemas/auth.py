from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LoginResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    token: str
    exp_ms: int
