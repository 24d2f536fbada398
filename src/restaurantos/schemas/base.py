from pydantic import BaseModel, ConfigDict, model_validator


class PartialUpdate(BaseModel):
    """
    PATCH payload: omitted fields stay as they are, an explicit null is
    rejected because every updatable column is NOT NULL.
    """

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def reject_nulls(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self
