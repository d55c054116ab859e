"""
Live clone operation against vSphere
"""

import logging
import time
from typing import Callable, List, Optional

from pyVmomi import vim

from ..config import WaitPolicy
from ..guard import InFlightRegistry
from ..infrastructure.vsphere.client import VSphereClient
from ..infrastructure.vsphere.vm_manager import VMManager, vm_to_attributes
from ..inventory import InventoryNavigator
from ..models import CloneOptions, ClonePath, CloneResult
from ..result import assemble_result
from ..waiter import CompletionWaiter
from .base import CloneOperation


logger = logging.getLogger(__name__)


class RealCloneOperation(CloneOperation):
    """Clone through a connected VSphereClient"""

    def __init__(self, client: VSphereClient, wait_policy: Optional[WaitPolicy] = None,
                 sleeper: Callable[[float], None] = time.sleep,
                 registry: Optional[InFlightRegistry] = None):
        super().__init__(registry)
        self.client = client
        self.manager = VMManager(client)
        self.navigator = InventoryNavigator(client, client, vim.Folder, vim.VirtualMachine)
        self.wait_policy = wait_policy or WaitPolicy()
        self.sleeper = sleeper

    def list_datacenter_names(self) -> List[str]:
        return self.client.list_datacenter_names()

    def _clone(self, options: CloneOptions, path: ClonePath) -> CloneResult:
        template_ref = self.navigator.resolve(path)
        task = self.manager.issue_clone(template_ref, options)

        waiter = CompletionWaiter.from_wait_policy(
            find_vm=lambda: self.manager.find_vm(template_ref.folder, options.name),
            to_attributes=vm_to_attributes,
            policy=self.wait_policy,
            sleeper=self.sleeper,
        )
        waited = waiter.wait(task, block=options.wait, need_address=bool(options.power_on))
        if not options.wait:
            # the task keeps running after we return
            self.registry.hold_until(options.name, task.is_done)
        if waited.vm is not None:
            logger.info(f"Clone {options.name} is available ({task.ref})")

        return assemble_result(waited.vm, task.ref, vm_to_attributes,
                               attributes=waited.attributes, outcome=waited.outcome)
