"""
Clone operation factory selecting the execution mode
"""

import logging
from typing import Any, Dict, Type

from .base import CloneOperation
from .mock import MockCloneOperation
from .real import RealCloneOperation


logger = logging.getLogger(__name__)


class CloneOperationFactory:
    """Factory for live and simulated clone operations"""

    _operations: Dict[str, Type[CloneOperation]] = {
        'real': RealCloneOperation,
        'mock': MockCloneOperation,
    }

    @classmethod
    def create(cls, mode: str = 'real', **kwargs: Any) -> CloneOperation:
        """
        Create the clone operation for mode

        Args:
            mode: 'real' (needs client=VSphereClient) or 'mock'
            **kwargs: Passed to the operation constructor

        Raises:
            ValueError: If mode is not registered
        """
        if mode not in cls._operations:
            raise ValueError(f"Unsupported clone mode: {mode}")

        operation_class = cls._operations[mode]
        logger.info(f"Creating {operation_class.__name__} for mode: {mode}")
        return operation_class(**kwargs)

    @classmethod
    def register_operation(cls, mode: str, operation_class: Type[CloneOperation]) -> None:
        """Register an additional execution mode"""
        cls._operations[mode] = operation_class
        logger.info(f"Registered {operation_class.__name__} for mode: {mode}")
