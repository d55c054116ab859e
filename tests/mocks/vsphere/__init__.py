"""
vSphere mock infrastructure for testing
"""
from .base import MockVSphereObject
from .service import MockServiceInstance
from .vm import MockVirtualMachine
from .inventory import (
    MockComputeResource,
    MockDatacenter,
    MockFolder,
    MockHostSystem,
    MockResourcePool,
)
from .tasks import MockTask

__all__ = [
    'MockVSphereObject',
    'MockServiceInstance',
    'MockVirtualMachine',
    'MockComputeResource',
    'MockDatacenter',
    'MockFolder',
    'MockHostSystem',
    'MockResourcePool',
    'MockTask',
]
