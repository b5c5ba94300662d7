from pydantic import AliasGenerator, BaseModel, StrictStr
from pydantic.alias_generators import to_camel


class VersionCreate(BaseModel):
    content: StrictStr


class VersionSummary(BaseModel):
    id: str
    timestamp: str
    added_words: list[str]
    removed_words: list[str]
    old_length: int
    new_length: int

    model_config = {
        "from_attributes": True,
        "alias_generator": AliasGenerator(serialization_alias=to_camel),
    }


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
