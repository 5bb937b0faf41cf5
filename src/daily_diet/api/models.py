"""Request bodies accepted by the HTTP API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class MealPayload(BaseModel):
    """Full set of mutable meal fields, used for create and replace."""

    model_config = ConfigDict(strict=True)

    name: str
    description: str
    in_diet: bool = Field(validation_alias=AliasChoices("in_diet", "inDiet"))


class UserPayload(BaseModel):
    """Display name registered for a session."""

    model_config = ConfigDict(strict=True)

    name: str
