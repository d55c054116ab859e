"""
Template path resolution and inventory navigation
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol

from .exceptions import (
    FolderNotFoundError,
    InvalidPathError,
    TemplateNotFoundError,
    UnknownDatacenterError,
)
from .models import ClonePath, TemplateRef


logger = logging.getLogger(__name__)

ROOT_SEGMENT = 'Datacenters'
VM_FOLDER_MARKER = 'vm'


class DatacenterCatalog(Protocol):
    """Read-only datacenter lookup supplied by the caller"""

    def list_datacenter_names(self) -> List[str]:
        ...

    def get_datacenter(self, name: str) -> Any:
        ...


class ChildFinder(Protocol):
    """Targeted "find child by name and type" lookup"""

    def find_child(self, parent: Any, name: str, vimtype: Any) -> Optional[Any]:
        ...


class StaticDatacenterCatalog:
    """DatacenterCatalog over a plain name -> handle mapping"""

    def __init__(self, datacenters: Dict[str, Any]):
        self._datacenters = dict(datacenters)

    def list_datacenter_names(self) -> List[str]:
        return list(self._datacenters)

    def get_datacenter(self, name: str) -> Any:
        return self._datacenters[name]


def parse_clone_path(raw: str, valid_datacenters: Iterable[str]) -> ClonePath:
    """
    Parse and validate a template path

    Args:
        raw: Path like /Datacenters/DC1/vm/Templates/web-base
        valid_datacenters: Names of the datacenters the caller can see

    Returns:
        Parsed ClonePath

    Raises:
        InvalidPathError: If the path does not start with /Datacenters or
            has no datacenter or template segment
        UnknownDatacenterError: If the datacenter is not in valid_datacenters
    """
    elements = (raw or '').split('/')
    # A rooted path starts with the empty element before the leading slash
    if len(elements) < 2 or elements[0] != '' or elements[1] != ROOT_SEGMENT:
        raise InvalidPathError(
            f"vm_clone path option must start with /{ROOT_SEGMENT}.  Got: {raw}",
            code="invalid_path",
            details={'path': raw},
        )

    datacenter_name = elements[2] if len(elements) > 2 else ''
    if not datacenter_name:
        raise InvalidPathError(
            f"vm_clone path option has no datacenter.  Got: {raw}",
            code="invalid_path",
            details={'path': raw},
        )

    valid = list(valid_datacenters)
    if datacenter_name not in valid:
        raise UnknownDatacenterError(datacenter_name, valid)

    remaining = elements[3:]
    has_marker = bool(remaining) and remaining[0] == VM_FOLDER_MARKER
    if has_marker:
        remaining = remaining[1:]

    if not remaining or not remaining[-1]:
        raise InvalidPathError(
            f"vm_clone path option has no template name.  Got: {raw}",
            code="invalid_path",
            details={'path': raw, 'datacenter': datacenter_name},
        )

    return ClonePath(
        raw=raw,
        datacenter_name=datacenter_name,
        has_vm_folder_marker=has_marker,
        folder_chain=tuple(remaining[:-1]),
        leaf_name=remaining[-1],
    )


class InventoryNavigator:
    """Walks a ClonePath down to the template and its placement target"""

    def __init__(self, catalog: DatacenterCatalog, finder: ChildFinder,
                 folder_type: Any, vm_type: Any):
        self.catalog = catalog
        self.finder = finder
        self.folder_type = folder_type
        self.vm_type = vm_type

    def resolve(self, path: ClonePath) -> TemplateRef:
        """Resolve the template, its folder and the pool to clone into"""
        datacenter = self.catalog.get_datacenter(path.datacenter_name)
        folder = self.descend(datacenter.vmFolder, path)

        template = self.finder.find_child(folder, path.leaf_name, self.vm_type)
        if template is None:
            raise TemplateNotFoundError(path.leaf_name, path.raw)

        pool = self.placement_for(template)
        logger.info(f"Resolved template {path.leaf_name} in datacenter "
                    f"{path.datacenter_name}")
        return TemplateRef(template=template, pool=pool, folder=folder)

    def descend(self, root_folder: Any, path: ClonePath) -> Any:
        """Fold the folder chain one targeted lookup per level"""
        current = root_folder
        for folder_name in path.folder_chain:
            child = self.finder.find_child(current, folder_name, self.folder_type)
            if child is None:
                raise FolderNotFoundError(folder_name, path.raw)
            current = child
        return current

    @staticmethod
    def placement_for(template: Any) -> Any:
        """Default resource pool of the compute resource hosting the template"""
        # TODO: accept an explicit resource pool instead of always using the host's
        host = template.runtime.host
        return host.parent.resourcePool
