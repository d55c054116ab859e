"""
Shared test fixtures and configuration for vsclone tests
"""

import pytest
from unittest.mock import Mock, patch
from vsclone.guard import InFlightRegistry
from vsclone.infrastructure.vsphere.client import VSphereClient
from vsclone.infrastructure.vsphere.vm_manager import VMManager
from tests.mocks.vsphere import MockServiceInstance
from tests.mocks.vsphere.device_specs import create_mock_resource_pool


class RecordingSleeper:
    """Sleeper that records requested delays instead of sleeping"""

    def __init__(self, on_sleep=None):
        self.calls = []
        self.on_sleep = on_sleep

    def __call__(self, seconds):
        self.calls.append(seconds)
        if self.on_sleep is not None:
            self.on_sleep(len(self.calls))

    @property
    def elapsed(self):
        return sum(self.calls)


@pytest.fixture
def sleeper():
    """Sleeper that never blocks"""
    return RecordingSleeper()


@pytest.fixture
def registry():
    """Fresh in-flight registry per test"""
    return InFlightRegistry()


@pytest.fixture
def mock_vsphere_service_instance():
    """Simulated vCenter with DC1/vm/Templates/web-base"""
    service = MockServiceInstance(("DC1",))
    service.add_template("DC1", ["Templates"], "web-base")
    return service


@pytest.fixture
def template(mock_vsphere_service_instance):
    """The web-base template in the simulated inventory"""
    folder = mock_vsphere_service_instance.datacenter("DC1").vmFolder.child_named("Templates")
    return folder.child_named("web-base")


@pytest.fixture
def vsphere_client(mock_vsphere_service_instance):
    """VSphereClient connected to the simulated vCenter"""
    client = VSphereClient(
        host="vcenter.example.com",
        username="admin@vsphere.local",
        password="password",
        task_poll_interval=0,
    )
    with patch('pyVim.connect.SmartConnect', return_value=mock_vsphere_service_instance), \
            patch('atexit.register'):
        client.connect()
    return client


@pytest.fixture
def mock_vsphere_client():
    """Mock vSphere client"""
    client = Mock(spec=VSphereClient)
    client.host = "vcenter.example.com"
    client.username = "admin@vsphere.local"
    client.password = "password"
    client.port = 443

    client.connect = Mock()
    client.disconnect = Mock()
    client.list_datacenter_names = Mock(return_value=["DC1"])
    client.get_datacenter = Mock()
    client.find_child = Mock(return_value=None)
    client.wait_for_task = Mock()

    return client


@pytest.fixture
def mock_vm_manager(mock_vsphere_client):
    """VM manager over the mock client"""
    return VMManager(mock_vsphere_client)


@pytest.fixture
def mock_resource_pool():
    """Resource pool that passes vim.ResourcePool type checks"""
    return create_mock_resource_pool()
