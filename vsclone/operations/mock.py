"""
Simulated clone operation; never talks to vSphere
"""

from typing import Any, Dict, Iterable, List, Optional

from ..exceptions import TemplateNotFoundError
from ..guard import InFlightRegistry
from ..models import CloneOptions, ClonePath, CloneResult
from .base import CloneOperation


DEFAULT_DATACENTERS = ('Solutions',)
DEFAULT_VIRTUAL_MACHINES = (
    {'name': 'rhel64', 'mo_ref': 'vm-715', 'power_state': 'poweredOff'},
    {'name': 'centos56gm', 'mo_ref': 'vm-698', 'power_state': 'poweredOn'},
)


class MockCloneOperation(CloneOperation):
    """Validates like the live mode, then returns canned references"""

    def __init__(self, datacenters: Iterable[str] = DEFAULT_DATACENTERS,
                 virtual_machines: Iterable[Dict[str, Any]] = DEFAULT_VIRTUAL_MACHINES,
                 vm_ref: str = 'vm-123', task_ref: str = 'task-1234',
                 registry: Optional[InFlightRegistry] = None):
        super().__init__(registry)
        self.datacenters = list(datacenters)
        self.virtual_machines = [dict(vm) for vm in virtual_machines]
        self.vm_ref = vm_ref
        self.task_ref = task_ref

    def list_datacenter_names(self) -> List[str]:
        return list(self.datacenters)

    def _clone(self, options: CloneOptions, path: ClonePath) -> CloneResult:
        if not any(vm.get('name') == path.leaf_name for vm in self.virtual_machines):
            raise TemplateNotFoundError(path.leaf_name, path.raw)
        return CloneResult(task_ref=self.task_ref, vm_ref=self.vm_ref)
