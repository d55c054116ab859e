"""
Canonical clone result assembly
"""

from typing import Any, Callable, Dict, Optional

from .models import CloneOutcome, CloneResult


def assemble_result(vm: Any, task_ref: str,
                    to_attributes: Callable[[Any], Dict[str, Any]],
                    attributes: Optional[Dict[str, Any]] = None,
                    outcome: CloneOutcome = CloneOutcome.COMPLETED) -> CloneResult:
    """
    Build the result record

    A missing VM yields an empty result rather than an error. Attributes
    already read while waiting are reused instead of converting again.
    """
    if vm is None:
        return CloneResult(task_ref=task_ref, outcome=outcome)

    if attributes is None:
        attributes = to_attributes(vm)
    return CloneResult(
        task_ref=task_ref,
        vm_ref=vm._moId,
        vm_attributes=dict(attributes),
        outcome=outcome,
    )
