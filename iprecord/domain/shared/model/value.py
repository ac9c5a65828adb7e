from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel, StringConstraints

T = TypeVar("T")

# Required string argument that must not be empty after decoding
NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    model_config = ConfigDict(frozen=True)
