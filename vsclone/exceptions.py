"""
vsclone exceptions
"""


class VSCloneError(Exception):
    """Base exception for all vsclone errors"""
    def __init__(self, message, code=None, details=None):
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ConnectionError(VSCloneError):
    """Connection-related errors"""
    pass


class AuthenticationError(VSCloneError):
    """Authentication failure"""
    pass


class InvalidPathError(VSCloneError):
    """Template path is malformed"""
    pass


class UnknownDatacenterError(VSCloneError):
    """Datacenter named in the template path is not in the catalog"""

    def __init__(self, datacenter_name, valid_names):
        valid = ",".join(valid_names)
        super().__init__(
            f"Datacenter {datacenter_name} does not exist, only datacenters "
            f"{valid} are accessible.",
            code="unknown_datacenter",
            details={'datacenter': datacenter_name, 'valid_datacenters': list(valid_names)},
        )
        self.datacenter_name = datacenter_name


class VMNotFoundError(VSCloneError):
    """Inventory object not found"""
    pass


class FolderNotFoundError(VMNotFoundError):
    """A folder in the template path could not be descended into"""

    def __init__(self, folder_name, path=None):
        super().__init__(
            f"Could not descend into {folder_name}.  Please check your path.",
            code="folder_not_found",
            details={'folder': folder_name, 'path': path},
        )
        self.folder_name = folder_name


class TemplateNotFoundError(VMNotFoundError):
    """Template VM not found at the end of the path"""

    def __init__(self, template_name, path=None):
        super().__init__(
            f"Could not find VM template '{template_name}'",
            code="template_not_found",
            details={'template': template_name, 'path': path},
        )
        self.template_name = template_name


class AddressNotReadyError(VSCloneError):
    """Cloned VM never reported a network address within the poll budget"""
    pass


class TaskError(VSCloneError):
    """vSphere task finished in the error state"""
    pass


class CloneInProgressError(VSCloneError):
    """A clone targeting the same VM name is already running"""
    pass


class InvalidOptionError(VSCloneError):
    """A clone option is missing or has an unsupported value"""
    pass
