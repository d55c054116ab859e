"""
Base clone operation shared by the live and simulated modes
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Union

from ..exceptions import InvalidOptionError
from ..guard import InFlightRegistry
from ..inventory import parse_clone_path
from ..models import TRANSFORMS, CloneOptions, ClonePath, CloneResult


logger = logging.getLogger(__name__)

OptionsInput = Union[CloneOptions, Dict[str, Any]]

# Guards same-name clones across every operation in the process
_IN_FLIGHT = InFlightRegistry()


def validate_clone_options(options: OptionsInput,
                           datacenter_names: List[str]) -> Tuple[CloneOptions, ClonePath]:
    """
    Validate options and parse the template path

    Both execution modes go through this function so they reject exactly the
    same inputs.

    Raises:
        InvalidOptionError: Missing name/template path or unsupported transform
        InvalidPathError: Path not rooted at /Datacenters
        UnknownDatacenterError: Datacenter not in datacenter_names
    """
    if not isinstance(options, CloneOptions):
        options = CloneOptions.from_dict(options)

    if options.transform not in TRANSFORMS:
        raise InvalidOptionError(
            f"Unsupported transform '{options.transform}', expected one of "
            f"{', '.join(TRANSFORMS)}",
            code="invalid_transform",
            details={'transform': options.transform},
        )

    path = parse_clone_path(options.template_path, datacenter_names)
    if options.force:
        logger.debug("force option set; it does not change clone behaviour")
    return options, path


class CloneOperation(ABC):
    """Clones a template into a new VM"""

    def __init__(self, registry: Optional[InFlightRegistry] = None):
        self.registry = registry if registry is not None else _IN_FLIGHT

    @abstractmethod
    def list_datacenter_names(self) -> List[str]:
        """Datacenters the template path may name"""
        pass

    @abstractmethod
    def _clone(self, options: CloneOptions, path: ClonePath) -> CloneResult:
        """Mode-specific clone after validation"""
        pass

    def clone_vm(self, options: OptionsInput) -> CloneResult:
        """
        Validate, then clone while holding the target name

        Raises:
            VSCloneError: Any hard failure; a non-blocking give-up is returned
                as a result with outcome GAVE_UP instead
        """
        clone_options, path = validate_clone_options(options, self.list_datacenter_names())
        with self.registry.claim(clone_options.name):
            return self._clone(clone_options, path)
