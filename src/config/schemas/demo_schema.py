"""Configuration for demonstrations that depend on time or randomness."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DemoConfig(BaseModel):
    """Demonstration knobs."""
    model_config = ConfigDict(extra="forbid")

    singleton_delay_ms: int = Field(1000, ge=0, description="Delay before each singleton thread asks for the instance")
    memento_state_length: int = Field(30, ge=1, description="Length of the random originator state")
    memento_seed: Optional[int] = Field(None, description="Seed for the originator's random state, unset for nondeterministic runs")
