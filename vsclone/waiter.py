"""
Completion and readiness waiting for submitted clones

Two independent budgets apply. Blocking mode trusts the task's own
completion signal, then polls for a guest network address since address
assignment has no completion signal of its own. Non-blocking mode skips the
task entirely and polls for the new VM by name until it shows up or the
lookup budget runs out.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .config import WaitPolicy
from .exceptions import AddressNotReadyError
from .models import CloneOutcome


logger = logging.getLogger(__name__)

ADDRESS_KEY = 'ipaddress'


class WaiterState(Enum):
    SUBMITTED = "submitted"
    COMPLETING = "completing"
    READY = "ready"
    TIMED_OUT = "timed_out"
    POLLING = "polling"
    FOUND = "found"
    GIVEN_UP = "given_up"


@dataclass
class RetryPolicy:
    """Bounded sleep-then-retry budget"""
    max_attempts: int
    interval: float
    sleeper: Callable[[float], None] = time.sleep

    @property
    def budget(self) -> float:
        return self.max_attempts * self.interval


@dataclass
class WaitResult:
    """What the waiter ended with; vm is None after a give-up"""
    vm: Any
    attributes: Optional[Dict[str, Any]]
    outcome: CloneOutcome
    attempts: int = 0


@dataclass
class CompletionWaiter:
    """
    Waits for a submitted clone task

    Args:
        find_vm: Looks the new VM up by name in its folder, None if absent
        to_attributes: Converts a VM handle to an attribute dict
        address_policy: Budget for the blocking-mode address poll
        lookup_policy: Budget for the non-blocking existence poll
    """
    find_vm: Callable[[], Any]
    to_attributes: Callable[[Any], Dict[str, Any]]
    address_policy: RetryPolicy
    lookup_policy: RetryPolicy
    state: WaiterState = field(default=WaiterState.SUBMITTED, init=False)
    attempts: int = field(default=0, init=False)

    @classmethod
    def from_wait_policy(cls, find_vm: Callable[[], Any],
                         to_attributes: Callable[[Any], Dict[str, Any]],
                         policy: WaitPolicy,
                         sleeper: Callable[[float], None] = time.sleep) -> "CompletionWaiter":
        return cls(
            find_vm=find_vm,
            to_attributes=to_attributes,
            address_policy=RetryPolicy(policy.address_attempts, policy.address_interval, sleeper),
            lookup_policy=RetryPolicy(policy.lookup_attempts, policy.lookup_interval, sleeper),
        )

    def wait(self, task, block: bool = True, need_address: bool = True) -> WaitResult:
        """
        Run the blocking or the non-blocking branch for task

        need_address is False for clones left powered off; those never get a
        guest address, so blocking mode returns once the task completes.
        """
        if self.state is not WaiterState.SUBMITTED:
            raise RuntimeError(f"Waiter already used (state: {self.state.value})")
        if block:
            return self._wait_for_address(task, need_address)
        return self._poll_for_vm()

    def _wait_for_address(self, task, need_address: bool = True) -> WaitResult:
        self.state = WaiterState.COMPLETING
        vm = task.wait_for_completion()
        attributes = self.to_attributes(vm) if vm is not None else {}
        if not need_address:
            self.state = WaiterState.READY
            return WaitResult(vm, attributes, CloneOutcome.COMPLETED, self.attempts)

        policy = self.address_policy
        while not attributes.get(ADDRESS_KEY):
            self.attempts += 1
            if self.attempts > policy.max_attempts:
                self.state = WaiterState.TIMED_OUT
                raise AddressNotReadyError(
                    "The ipaddress of the new VM is not ready! Please check the "
                    "VM's network status in vSphere Client.",
                    code="address_not_ready",
                    details={'task': task.ref, 'waited': policy.budget},
                )
            policy.sleeper(policy.interval)
            logger.warning(f"Waiting until the VM's ip address is ready. "
                           f"{self.attempts * policy.interval:g} seconds passed.")
            vm = self.find_vm()
            attributes = self.to_attributes(vm) if vm is not None else {}

        self.state = WaiterState.READY
        return WaitResult(vm, attributes, CloneOutcome.COMPLETED, self.attempts)

    def _poll_for_vm(self) -> WaitResult:
        self.state = WaiterState.POLLING
        policy = self.lookup_policy

        vm = self.find_vm()
        while vm is None:
            self.attempts += 1
            if self.attempts > policy.max_attempts:
                self.state = WaiterState.GIVEN_UP
                logger.warning(f"New VM not visible after {policy.budget:g} seconds, "
                               f"giving up; poll the task instead")
                return WaitResult(None, None, CloneOutcome.GAVE_UP, policy.max_attempts)
            logger.debug(f"New VM not visible yet (attempt {self.attempts})")
            policy.sleeper(policy.interval)
            vm = self.find_vm()

        self.state = WaiterState.FOUND
        return WaitResult(vm, None, CloneOutcome.COMPLETED, self.attempts)
