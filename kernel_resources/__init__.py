from kernel_resources._version import __version__
from kernel_resources.models import (EncodeFailure, Kernel, KernelSpec,
                                     KernelSpecs, MalformedDocument,
                                     ResourceError, ResourceModel, Session,
                                     Spec, Terminal, TypeMismatch,
                                     kernelspec_sort_key)

__all__ = [
    "__version__",
    "EncodeFailure",
    "Kernel",
    "KernelSpec",
    "KernelSpecs",
    "MalformedDocument",
    "ResourceError",
    "ResourceModel",
    "Session",
    "Spec",
    "Terminal",
    "TypeMismatch",
    "kernelspec_sort_key",
]
