"""
vsclone - clone vSphere templates into new virtual machines
"""

__version__ = "0.1.0"
__author__ = "vsclone Development Team"

from .client import VSCloneClient
from .config import VSphereSettings, WaitPolicy
from .models import CloneOptions, CloneOutcome, CloneResult, ClonePath
from .exceptions import (
    VSCloneError,
    InvalidPathError,
    InvalidOptionError,
    UnknownDatacenterError,
    FolderNotFoundError,
    TemplateNotFoundError,
    AddressNotReadyError,
    TaskError,
    CloneInProgressError,
)

__all__ = [
    "VSCloneClient",
    "VSphereSettings",
    "WaitPolicy",
    "CloneOptions",
    "CloneOutcome",
    "CloneResult",
    "ClonePath",
    "VSCloneError",
    "InvalidPathError",
    "InvalidOptionError",
    "UnknownDatacenterError",
    "FolderNotFoundError",
    "TemplateNotFoundError",
    "AddressNotReadyError",
    "TaskError",
    "CloneInProgressError",
]
