"""
Unit tests for clone spec assembly
"""

from pyVmomi import vim
from vsclone.infrastructure.vsphere.clone_spec import build_clone_spec, build_relocate_spec
from vsclone.models import CloneOptions


class TestCloneSpec:
    """Test cases for relocate and clone specs"""

    def test_relocate_spec_defaults(self, mock_resource_pool):
        spec = build_relocate_spec(mock_resource_pool)

        assert isinstance(spec, vim.vm.RelocateSpec)
        assert spec.pool is mock_resource_pool
        assert spec.transform == "sparse"

    def test_relocate_spec_flat(self, mock_resource_pool):
        assert build_relocate_spec(mock_resource_pool, "flat").transform == "flat"

    def test_clone_spec_from_defaults(self, mock_resource_pool):
        options = CloneOptions(template_path="/Datacenters/DC1/web-base", name="web-01")
        spec = build_clone_spec(mock_resource_pool, options)

        assert isinstance(spec, vim.vm.CloneSpec)
        assert spec.location.pool is mock_resource_pool
        assert spec.location.transform == "sparse"
        assert spec.powerOn is True
        assert spec.template is False

    def test_clone_spec_honours_options(self, mock_resource_pool):
        options = CloneOptions(template_path="/Datacenters/DC1/web-base", name="web-01",
                               power_on=False, transform="flat")
        spec = build_clone_spec(mock_resource_pool, options)

        assert spec.powerOn is False
        assert spec.location.transform == "flat"
        assert spec.template is False
