"""
Unit tests for result assembly
"""

from unittest.mock import Mock
from vsclone.models import CloneOutcome
from vsclone.result import assemble_result


class TestAssembleResult:
    """Test cases for assemble_result"""

    def test_absent_vm(self):
        """Test a missing VM gives an empty but valid result"""
        to_attributes = Mock()
        result = assemble_result(None, "task-7", to_attributes, outcome=CloneOutcome.GAVE_UP)

        assert result.vm_ref is None
        assert result.vm_attributes == {}
        assert result.task_ref == "task-7"
        assert result.outcome is CloneOutcome.GAVE_UP
        to_attributes.assert_not_called()

    def test_converts_attributes(self):
        vm = Mock()
        vm._moId = "vm-11"
        to_attributes = Mock(return_value={'name': "web-01"})

        result = assemble_result(vm, "task-7", to_attributes)

        assert result.vm_ref == "vm-11"
        assert result.vm_attributes == {'name': "web-01"}
        to_attributes.assert_called_once_with(vm)

    def test_reuses_known_attributes(self):
        vm = Mock()
        vm._moId = "vm-11"
        to_attributes = Mock()

        result = assemble_result(vm, "task-7", to_attributes, attributes={'ipaddress': "10.0.0.1"})

        assert result.vm_attributes == {'ipaddress': "10.0.0.1"}
        to_attributes.assert_not_called()
