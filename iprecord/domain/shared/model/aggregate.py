from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Mutable consistency boundary; assignments are re-validated."""

    model_config = ConfigDict(validate_assignment=True)
