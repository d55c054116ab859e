"""
Connection settings and wait budgets
"""

import os
from dataclasses import dataclass


_TRUE_VALUES = ('1', 'true', 'yes', 'on')


@dataclass
class VSphereSettings:
    """vSphere connection settings"""
    host: str
    username: str
    password: str
    port: int = 443
    disable_ssl_verification: bool = False

    @classmethod
    def from_env(cls, prefix: str = "VSPHERE_") -> "VSphereSettings":
        """
        Build settings from environment variables

        Reads <prefix>HOST, <prefix>USERNAME, <prefix>PASSWORD, <prefix>PORT
        and <prefix>DISABLE_SSL_VERIFICATION.

        Raises:
            ValueError: If host or username is not set
        """
        host = os.getenv(f"{prefix}HOST")
        username = os.getenv(f"{prefix}USERNAME")
        if not host or not username:
            raise ValueError(f"{prefix}HOST and {prefix}USERNAME must be set")

        disable_ssl = os.getenv(f"{prefix}DISABLE_SSL_VERIFICATION", "false")
        return cls(
            host=host,
            username=username,
            password=os.getenv(f"{prefix}PASSWORD", ""),
            port=int(os.getenv(f"{prefix}PORT", "443")),
            disable_ssl_verification=disable_ssl.strip().lower() in _TRUE_VALUES,
        )


@dataclass(frozen=True)
class WaitPolicy:
    """Retry budgets for the two polling loops (intervals in seconds)"""
    address_attempts: int = 60
    address_interval: float = 5
    lookup_attempts: int = 10
    lookup_interval: float = 15

    @property
    def address_budget(self) -> float:
        return self.address_attempts * self.address_interval

    @property
    def lookup_budget(self) -> float:
        return self.lookup_attempts * self.lookup_interval
