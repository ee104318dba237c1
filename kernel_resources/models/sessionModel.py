import typing as t

from kernel_resources.models.kernelModel import Kernel
from kernel_resources.models.resourceModel import ResourceModel


class Session(ResourceModel):
    id: str = ""
    name: str = ""
    path: str = ""
    type: str = ""
    kernel: t.Optional[Kernel] = None
    notebook: dict[str, str] = {}
