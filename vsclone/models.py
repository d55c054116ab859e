"""
Data models for template cloning
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .exceptions import InvalidOptionError


TRANSFORMS = ('sparse', 'flat')

# Keys accepted by CloneOptions.from_dict, including the hash-style aliases
_OPTION_ALIASES = {
    'templatePath': 'template_path',
    'template_path': 'template_path',
    'name': 'name',
    'force': 'force',
    'wait': 'wait',
    'powerOn': 'power_on',
    'power_on': 'power_on',
    'transform': 'transform',
}


@dataclass
class CloneOptions:
    """Options for a single clone request"""
    template_path: str
    name: str
    force: bool = False  # accepted for compatibility, not acted on
    wait: bool = True
    power_on: bool = True
    transform: str = 'sparse'

    def __post_init__(self):
        for required in ('template_path', 'name'):
            if not getattr(self, required):
                raise InvalidOptionError(
                    f"vm_clone option '{required}' is required",
                    code="missing_option",
                    details={'option': required},
                )

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "CloneOptions":
        """
        Build options from a plain mapping

        Unknown keys are ignored. Missing required keys raise InvalidOptionError
        so both execution modes report them the same way.
        """
        kwargs: Dict[str, Any] = {'template_path': None, 'name': None}
        for key, value in options.items():
            target = _OPTION_ALIASES.get(key)
            if target is not None:
                kwargs[target] = value
        return cls(**kwargs)


@dataclass(frozen=True)
class ClonePath:
    """Parsed /Datacenters/<dc>/[vm/]<folders...>/<template> path"""
    raw: str
    datacenter_name: str
    has_vm_folder_marker: bool
    folder_chain: Tuple[str, ...]
    leaf_name: str

    @property
    def segments(self) -> Tuple[str, ...]:
        """Folders followed by the leaf name"""
        return self.folder_chain + (self.leaf_name,)


@dataclass
class TemplateRef:
    """Resolved template plus where its clone goes"""
    template: Any
    pool: Any
    folder: Any


class CloneOutcome(Enum):
    """How a clone operation ended when it did not raise"""
    COMPLETED = "completed"
    GAVE_UP = "gave_up"


@dataclass(frozen=True)
class CloneResult:
    """Canonical clone result"""
    task_ref: str
    vm_ref: Optional[str] = None
    vm_attributes: Dict[str, Any] = field(default_factory=dict)
    outcome: CloneOutcome = CloneOutcome.COMPLETED

    @property
    def gave_up(self) -> bool:
        return self.outcome is CloneOutcome.GAVE_UP

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vm_ref': self.vm_ref,
            'vm_attributes': dict(self.vm_attributes),
            'task_ref': self.task_ref,
        }
