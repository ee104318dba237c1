import typing as t

from pydantic import Field, SerializerFunctionWrapHandler, field_serializer

from kernel_resources.models.resourceModel import ResourceModel

ENDPOINT_PARENT_RESOURCE = "endpointParentResource"


class Spec(ResourceModel):
    """The contents of a kernel.json file."""

    language: str = ""
    argv: list[str] = []
    display_name: str = ""


class KernelSpec(ResourceModel):
    id: str = Field(default="", alias="name")
    spec: t.Optional[Spec] = None
    resources: dict[str, str] = {}


def kernelspec_sort_key(spec_id: str, kernel_spec: KernelSpec) -> tuple[str, str, str]:
    """Sort key grouping specs by parent resource, then by display name.

    The spec id breaks any remaining tie so the order is fully determined.
    """
    parent = kernel_spec.resources.get(ENDPOINT_PARENT_RESOURCE, "")
    display_name = kernel_spec.spec.display_name if kernel_spec.spec is not None else ""
    return parent, display_name, spec_id


class KernelSpecs(ResourceModel):
    """The model served by ``GET /api/kernelspecs``."""

    default: str = ""
    kernelspecs: dict[str, KernelSpec] = {}

    _always_emit: t.ClassVar[frozenset[str]] = frozenset({"kernelspecs"})

    def sorted_specs(self) -> list[tuple[str, KernelSpec]]:
        return sorted(
            self.kernelspecs.items(), key=lambda item: kernelspec_sort_key(*item)
        )

    @field_serializer("kernelspecs", mode="wrap")
    def _serialize_kernelspecs(
        self, value: dict[str, KernelSpec], handler: SerializerFunctionWrapHandler
    ) -> dict[str, t.Any]:
        data = handler(value)
        return {spec_id: data[spec_id] for spec_id, _ in self.sorted_specs()}
