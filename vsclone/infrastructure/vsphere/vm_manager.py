"""
Clone submission and VM lookups for vSphere
"""

import logging
from typing import Dict, Any, Optional
from pyVmomi import vim
from .client import VSphereClient
from .clone_spec import build_clone_spec
from ...models import CloneOptions, TemplateRef


logger = logging.getLogger(__name__)


def vm_to_attributes(vm: vim.VirtualMachine) -> Dict[str, Any]:
    """Flatten a VM managed object into a plain attribute dict"""
    config = vm.config
    guest = vm.guest
    runtime = vm.runtime
    hardware = config.hardware if config else None

    return {
        'id': config.instanceUuid if config else None,
        'name': vm.name,
        'uuid': config.uuid if config else None,
        'instance_uuid': config.instanceUuid if config else None,
        'hostname': guest.hostName if guest else None,
        'operatingsystem': guest.guestFullName if guest else None,
        'ipaddress': guest.ipAddress if guest else None,
        'power_state': runtime.powerState if runtime else None,
        'connection_state': runtime.connectionState if runtime else None,
        'hypervisor': _host_name(runtime),
        'tools_state': guest.toolsRunningStatus if guest else None,
        'tools_version': guest.toolsVersionStatus if guest else None,
        'memory_mb': hardware.memoryMB if hardware else None,
        'cpus': hardware.numCPU if hardware else None,
        'mo_ref': vm._moId,
        'mac_addresses': _mac_addresses(hardware),
        'path': config.files.vmPathName if config and config.files else None,
    }


def _host_name(runtime) -> Optional[str]:
    if runtime is None or runtime.host is None:
        return None
    return runtime.host.name


def _mac_addresses(hardware) -> Dict[str, str]:
    """Map network adapter labels to MAC addresses"""
    macs = {}
    if hardware is None:
        return macs
    for device in hardware.device or []:
        if isinstance(device, vim.vm.device.VirtualEthernetCard):
            macs[device.deviceInfo.label] = device.macAddress
    return macs


class CloneTaskHandle:
    """A submitted clone task; consumed once by the waiter"""

    def __init__(self, task: vim.Task, client: VSphereClient):
        self.task = task
        self.client = client

    @property
    def ref(self) -> str:
        return self.task._moId

    def is_done(self) -> bool:
        """True once the task reached success or error"""
        return self.task.info.state in (vim.TaskInfo.State.success,
                                        vim.TaskInfo.State.error)

    def wait_for_completion(self) -> vim.VirtualMachine:
        """Block until the task finishes and return the new VM"""
        return self.client.wait_for_task(self.task)


class VMManager:
    """Clone operations against live vSphere"""

    def __init__(self, vsphere_client: VSphereClient):
        self.client = vsphere_client

    def issue_clone(self, template_ref: TemplateRef, options: CloneOptions) -> CloneTaskHandle:
        """Submit the clone next to the template; does not wait"""
        template = template_ref.template
        clone_spec = build_clone_spec(template_ref.pool, options)

        task = template.CloneVM_Task(
            folder=template.parent,
            name=options.name,
            spec=clone_spec
        )
        handle = CloneTaskHandle(task, self.client)
        logger.info(f"Submitted clone of {template.name} as {options.name} ({handle.ref})")
        return handle

    def find_vm(self, folder: vim.Folder, vm_name: str) -> Optional[vim.VirtualMachine]:
        """Find a VM by name directly inside folder"""
        return self.client.find_child(folder, vm_name, vim.VirtualMachine)
