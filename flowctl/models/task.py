"""
Task record model.

A task is one node of a workflow attempt's execution graph, as returned by the
control plane's ``/attempts/{id}/tasks`` resource. Python attributes are
snake_case; the wire names are their camelCase aliases.
"""

from typing import Annotated, Any, Optional

from pydantic import AwareDatetime, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _coerce_id(value: Any) -> Any:
    # Ids are opaque; the control plane may send them as JSON numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


TaskId = Annotated[str, BeforeValidator(_coerce_id)]

SUCCESS_STATE = "success"


class TaskRecord(BaseModel):
    """One task of a workflow attempt."""

    id: TaskId = Field(..., description="Task identifier")
    full_name: str = Field(..., min_length=1, description="Fully qualified task name")
    parent_id: Optional[TaskId] = Field(None, description="Id of the parent task")
    config: dict[str, Any] = Field(default_factory=dict, description="Task config")
    upstreams: tuple[TaskId, ...] = Field(
        default=(), description="Ids of the tasks this task waits for"
    )
    state: str = Field(..., description="Task state, e.g. 'success' or 'running'")
    cancel_requested: bool = Field(False, description="Cancellation was requested")
    export_params: dict[str, Any] = Field(default_factory=dict)
    store_params: dict[str, Any] = Field(default_factory=dict)
    state_params: dict[str, Any] = Field(default_factory=dict)
    updated_at: AwareDatetime = Field(..., description="Last state change")
    retry_at: Optional[AwareDatetime] = Field(None, description="Next retry time")
    started_at: Optional[AwareDatetime] = Field(
        None, description="When the task started running"
    )
    error: dict[str, Any] = Field(default_factory=dict, description="Error details")
    is_group: bool = Field(..., description="Whether the task aggregates child tasks")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "43",
                "fullName": "+daily+load",
                "parentId": "42",
                "config": {"sh>": "load.sh"},
                "upstreams": ["41"],
                "state": "success",
                "cancelRequested": False,
                "exportParams": {},
                "storeParams": {},
                "stateParams": {},
                "updatedAt": "2024-05-01T10:00:05Z",
                "retryAt": None,
                "startedAt": "2024-05-01T10:00:01Z",
                "error": {},
                "isGroup": False,
            }
        },
    )

    @property
    def is_invoked(self) -> bool:
        """True once the task has started running."""
        return self.started_at is not None

    @property
    def is_success(self) -> bool:
        return self.state == SUCCESS_STATE
