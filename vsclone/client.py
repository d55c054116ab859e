"""
Main vsclone client class
"""

from typing import Any, Dict, Optional

from .config import VSphereSettings, WaitPolicy
from .infrastructure.vsphere.client import VSphereClient
from .operations import CloneOperation, CloneOperationFactory


class VSCloneClient:
    """Clones vSphere templates, live or simulated"""

    def __init__(self, vsphere_host: str = "", vsphere_username: str = "",
                 vsphere_password: str = "", vsphere_port: int = 443,
                 disable_ssl_verification: bool = False, mock: bool = False,
                 wait_policy: Optional[WaitPolicy] = None,
                 **mock_options: Any):
        self.vsphere_host = vsphere_host
        self.vsphere_username = vsphere_username
        self.vsphere_password = vsphere_password
        self.vsphere_port = vsphere_port
        self.disable_ssl_verification = disable_ssl_verification
        self.mock = mock
        self.wait_policy = wait_policy
        self.mock_options = mock_options
        self.vsphere: Optional[VSphereClient] = None
        self._operation: Optional[CloneOperation] = None

    @classmethod
    def from_settings(cls, settings: VSphereSettings, **kwargs: Any) -> "VSCloneClient":
        return cls(
            vsphere_host=settings.host,
            vsphere_username=settings.username,
            vsphere_password=settings.password,
            vsphere_port=settings.port,
            disable_ssl_verification=settings.disable_ssl_verification,
            **kwargs
        )

    def connect(self) -> None:
        """Connect to vSphere, or set up the simulation in mock mode"""
        if self.mock:
            self._operation = CloneOperationFactory.create('mock', **self.mock_options)
            return

        self.vsphere = VSphereClient(
            host=self.vsphere_host,
            username=self.vsphere_username,
            password=self.vsphere_password,
            port=self.vsphere_port,
            disable_ssl_verification=self.disable_ssl_verification
        )
        self.vsphere.connect()
        self._operation = CloneOperationFactory.create(
            'real', client=self.vsphere, wait_policy=self.wait_policy)

    def disconnect(self) -> None:
        """Disconnect from vSphere"""
        if self.vsphere:
            self.vsphere.disconnect()
            self.vsphere = None
        self._operation = None

    @property
    def operation(self) -> CloneOperation:
        if self._operation is None:
            self.connect()
        return self._operation

    def clone_vm(self, **options: Any) -> Dict[str, Any]:
        """
        Clone a template and return {'vm_ref', 'vm_attributes', 'task_ref'}

        Options: template_path, name, wait, power_on, transform, force
        """
        return self.operation.clone_vm(options).to_dict()
