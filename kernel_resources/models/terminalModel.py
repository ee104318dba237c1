from pydantic import Field

from kernel_resources.models.resourceModel import ResourceModel


class Terminal(ResourceModel):
    id: str = Field(default="", alias="name")
