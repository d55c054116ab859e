"""
Clone operations for live and simulated execution
"""

from .base import CloneOperation, validate_clone_options
from .mock import MockCloneOperation
from .real import RealCloneOperation
from .factory import CloneOperationFactory

__all__ = [
    'CloneOperation',
    'validate_clone_options',
    'MockCloneOperation',
    'RealCloneOperation',
    'CloneOperationFactory',
]
