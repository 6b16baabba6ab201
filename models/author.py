from pydantic import BaseModel, ConfigDict


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    nationality: str | None = None
