from datetime import date
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

DOB_FORMAT = "%Y-%m-%d"

# --- People ---

class Person(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    email: str
    dob: str  # YYYY-MM-DD

    @field_validator("dob")
    @classmethod
    def _check_dob(cls, value: str) -> str:
        # date.fromisoformat also accepts "19950826" and week dates on 3.11+
        if len(value) != 10 or value[4] != "-" or value[7] != "-":
            raise ValueError(f"dob must use YYYY-MM-DD, got {value!r}")
        try:
            date.fromisoformat(value)
        except ValueError as e:
            raise ValueError(f"dob is not a calendar date: {value!r}") from e
        return value

    def birth_date(self) -> date:
        return date.fromisoformat(self.dob)
