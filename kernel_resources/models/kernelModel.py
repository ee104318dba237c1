import typing as t

from pydantic import Field, JsonValue

from kernel_resources.models.resourceModel import ResourceModel


class Kernel(ResourceModel):
    id: str = ""
    # name of the kernel spec the kernel was started from
    spec_id: str = Field(default="", alias="name")
    last_activity: str = ""
    connections: t.Optional[int] = None
    execution_state: str = ""
    env: dict[str, JsonValue] = {}
    metadata: t.Optional[dict[str, JsonValue]] = None
