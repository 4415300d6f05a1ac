"""Item models — declared requirements and held-item snapshots."""

from pydantic import BaseModel, Field


class RequiredItem(BaseModel):
    """An item a script needs before it can run.

    A charge in the name, e.g. "Ring of dueling(4)", also accepts the same
    item with up to `charge_range` more charges/doses.
    """

    name: str
    amount: int = Field(ge=0, default=1)
    charge_range: int = Field(ge=0, default=0)
    noted: bool = False

    model_config = {"frozen": True}


class HeldItem(BaseModel):
    """One inventory or equipment slot as observed from the client."""

    name: str
    amount: int = Field(ge=0, default=1)  # stack size
    noted: bool = False

    model_config = {"frozen": True}
