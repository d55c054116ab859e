"""
vSphere Client wrapper for template cloning
"""

import ssl
import atexit
import time
from typing import Optional, Dict, Any, List
from pyVim import connect
from pyVmomi import vim
from ...config import VSphereSettings
from ...exceptions import ConnectionError, AuthenticationError, TaskError


class VSphereClient:
    """vSphere API client: session, datacenter catalog and targeted lookups"""

    def __init__(self, host: str, username: str, password: str, port: int = 443,
                 disable_ssl_verification: bool = False,
                 task_poll_interval: float = 1.0):
        self.host = host
        self.username = username
        self.password = password
        self.port = port
        self.disable_ssl_verification = disable_ssl_verification
        self.task_poll_interval = task_poll_interval
        self._service_instance = None
        self._content = None
        self._datacenters: Optional[Dict[str, vim.Datacenter]] = None

    @classmethod
    def from_settings(cls, settings: VSphereSettings) -> "VSphereClient":
        return cls(
            host=settings.host,
            username=settings.username,
            password=settings.password,
            port=settings.port,
            disable_ssl_verification=settings.disable_ssl_verification,
        )

    def connect(self) -> None:
        """Establish connection to vSphere"""
        try:
            context = None
            if self.disable_ssl_verification:
                # Lab environments may need unverified SSL context
                context = ssl._create_unverified_context()  # nosec B323

            self._service_instance = connect.SmartConnect(
                host=self.host,
                user=self.username,
                pwd=self.password,
                port=self.port,
                sslContext=context
            )

            atexit.register(connect.Disconnect, self._service_instance)
            self._content = self._service_instance.RetrieveContent()

        except vim.fault.InvalidLogin:
            raise AuthenticationError(f"Failed to authenticate to vSphere {self.host}")
        except Exception as e:
            raise ConnectionError(f"Failed to connect to vSphere: {str(e)}")

    def disconnect(self) -> None:
        """Disconnect from vSphere"""
        if self._service_instance:
            connect.Disconnect(self._service_instance)
            self._service_instance = None
            self._content = None
            self._datacenters = None

    @property
    def content(self):
        """Get vSphere content object"""
        if not self._content:
            raise ConnectionError("Not connected to vSphere")
        return self._content

    def refresh_datacenters(self) -> Dict[str, vim.Datacenter]:
        """Reload the datacenter catalog from the root folder"""
        self._datacenters = {
            child.name: child
            for child in self.content.rootFolder.childEntity
            if isinstance(child, vim.Datacenter)
        }
        return self._datacenters

    @property
    def datacenters(self) -> Dict[str, vim.Datacenter]:
        if self._datacenters is None:
            return self.refresh_datacenters()
        return self._datacenters

    def list_datacenter_names(self) -> List[str]:
        """Names of the datacenters visible to this session"""
        return list(self.datacenters)

    def get_datacenter(self, name: str) -> vim.Datacenter:
        """Get datacenter object from the catalog"""
        return self.datacenters[name]

    def find_child(self, parent: Any, name: str, vimtype: Any) -> Optional[Any]:
        """
        Find a direct child of parent by name, filtered by type

        Uses the SearchIndex so only one level of the inventory is searched.
        """
        child = self.content.searchIndex.FindChild(entity=parent, name=name)
        if child is None or not isinstance(child, vimtype):
            return None
        return child

    def wait_for_task(self, task: vim.Task) -> Any:
        """Wait for vSphere task to complete and return its result"""
        while task.info.state not in [vim.TaskInfo.State.success,
                                      vim.TaskInfo.State.error]:
            time.sleep(self.task_poll_interval)

        if task.info.state == vim.TaskInfo.State.error:
            error = task.info.error
            message = getattr(error, 'localizedMessage', None) or str(error)
            raise TaskError(f"Task failed: {message}",
                            details={'task': task._moId})

        return task.info.result
