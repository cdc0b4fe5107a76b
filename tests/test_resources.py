"""
Tests for resource quantity resolution
"""
import pytest
from pydantic import ValidationError

from dynatrace_monitoring import ContainerResources, Cpu, CpuResources, MemoryResources, Size
from dynatrace_monitoring.create_manifests.models import ACTIVE_GATE_RESOURCE_DEFAULTS
from dynatrace_monitoring.create_manifests.resources import create_resource_requirements, resolve_quantity


class TestResolveQuantity:

    @pytest.mark.parametrize('value, expected', [
        ('0.1', '0.1'),
        ('100m', '100m'),
        (0.1, 0.1),
        (2, 2),
        (Cpu.from_millis(100), '100m'),
        (Size.mebibytes(256), '256Mi'),
    ])
    def test_caller_value_wins_over_default(self, value, expected):
        assert resolve_quantity(value, '500m') == expected

    def test_default_used_when_value_missing(self):
        assert resolve_quantity(None, '500m') == '500m'

    def test_missing_without_default(self):
        assert resolve_quantity(None) is None


class TestCreateResourceRequirements:

    def test_defaults_when_nothing_given(self):
        assert create_resource_requirements(None, ACTIVE_GATE_RESOURCE_DEFAULTS) == {
            'requests': {'cpu': '500m', 'memory': '512Mi'},
            'limits': {'cpu': '1000m', 'memory': '1.5Gi'},
        }

    def test_empty_without_defaults(self):
        assert create_resource_requirements(None) == {}
        assert create_resource_requirements(ContainerResources()) == {}

    def test_partial_override_keeps_other_defaults(self):
        resources = ContainerResources(memory=MemoryResources(limit=Size.gibibytes(2)))
        assert create_resource_requirements(resources, ACTIVE_GATE_RESOURCE_DEFAULTS) == {
            'requests': {'cpu': '500m', 'memory': '512Mi'},
            'limits': {'cpu': '1000m', 'memory': '2Gi'},
        }

    def test_unset_fields_are_absent_without_defaults(self):
        resources = ContainerResources(cpu=CpuResources(request=Cpu.from_millis(75)))
        assert create_resource_requirements(resources) == {
            'requests': {'cpu': '75m'},
        }


class TestResourceValidation:

    @pytest.mark.parametrize('value', [True, False])
    def test_cpu_rejects_booleans(self, value):
        with pytest.raises(ValidationError):
            CpuResources(request=value)

    @pytest.mark.parametrize('value', [True, False])
    def test_memory_rejects_booleans(self, value):
        with pytest.raises(ValidationError):
            MemoryResources.model_validate({'limit': value})

    def test_numbers_are_kept_as_given(self):
        assert CpuResources(request=2).request == 2
        assert CpuResources(request=0.5).request == 0.5
        assert MemoryResources(limit=268435456).limit == 268435456
