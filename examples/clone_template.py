"""
Example usage of the vsclone library
"""

import logging
import os
from vsclone import VSCloneClient, VSCloneError

logging.basicConfig(level=logging.INFO)

# Use environment variables for security: export VSPHERE_PASSWORD=your_password
client = VSCloneClient(
    vsphere_host=os.getenv("VSPHERE_HOST", "vcenter.example.com"),
    vsphere_username=os.getenv("VSPHERE_USERNAME", "administrator@vsphere.local"),
    vsphere_password=os.getenv("VSPHERE_PASSWORD", "your_password_here"),
    disable_ssl_verification=True  # For testing only
)

try:
    client.connect()

    # Block until the clone is up and has an IP address
    result = client.clone_vm(
        template_path="/Datacenters/Lab/vm/Templates/rhel8",
        name="web-01",
        transform="sparse",
    )
    print(f"VM: {result['vm_ref']} (task {result['task_ref']})")
    print(f"IP Address: {result['vm_attributes']['ipaddress']}")

    # Submit and return as soon as the VM shows up in the folder
    result = client.clone_vm(
        template_path="/Datacenters/Lab/Templates/rhel8",
        name="web-02",
        wait=False,
        power_on=False,
    )
    if result['vm_ref'] is None:
        print(f"web-02 not visible yet, follow task {result['task_ref']}")

except VSCloneError as e:
    print(f"Clone failed: {e}")
finally:
    client.disconnect()

# Mock mode validates the same way without a vCenter
mock_client = VSCloneClient(mock=True)
print(mock_client.clone_vm(template_path="/Datacenters/Solutions/rhel64", name="demo"))
