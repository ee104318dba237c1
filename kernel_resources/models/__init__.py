from kernel_resources.models.kernelModel import Kernel
from kernel_resources.models.kernelSpecModel import (KernelSpec, KernelSpecs,
                                                     Spec, kernelspec_sort_key)
from kernel_resources.models.resourceModel import (EncodeFailure,
                                                   MalformedDocument,
                                                   ResourceError, ResourceModel,
                                                   TypeMismatch)
from kernel_resources.models.sessionModel import Session
from kernel_resources.models.terminalModel import Terminal
