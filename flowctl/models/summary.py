"""
Summary models for a workflow attempt's tasks.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
)


class Stats(BaseModel):
    """Count, mean and population standard deviation of a non-empty sample.

    An empty sample has no Stats; fields holding one are Optional and None
    stands for the absent variant.
    """

    count: int = Field(..., ge=1, description="Number of values in the sample")
    mean: float = Field(..., description="Arithmetic mean")
    population_standard_deviation: float = Field(
        ..., ge=0.0, description="Standard deviation with divisor n"
    )

    model_config = _MODEL_CONFIG


class TasksSummary(BaseModel):
    """Aggregate counts and duration statistics over an attempt's tasks."""

    total_tasks: int = Field(..., ge=0)
    total_invoked_tasks: int = Field(..., ge=0)
    total_success_tasks: int = Field(..., ge=0)
    start_delay_millis: Optional[Stats] = None
    exec_duration_of_group_tasks_millis: Optional[Stats] = None
    exec_duration_of_non_group_tasks_millis: Optional[Stats] = None

    model_config = _MODEL_CONFIG

    @model_validator(mode="after")
    def check_totals(self) -> "TasksSummary":
        if self.total_invoked_tasks > self.total_tasks:
            raise ValueError(
                f"total_invoked_tasks ({self.total_invoked_tasks}) exceeds "
                f"total_tasks ({self.total_tasks})"
            )
        if self.total_success_tasks > self.total_invoked_tasks:
            raise ValueError(
                f"total_success_tasks ({self.total_success_tasks}) exceeds "
                f"total_invoked_tasks ({self.total_invoked_tasks})"
            )
        return self
