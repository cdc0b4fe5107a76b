from ..models import *
from ..quantities import Cpu, Size
from typing import Any

Quantity = Cpu | Size | str | int | float

def resolve_quantity(value: Quantity | None, default: str | None = None) -> str | int | float | None:
    """
        Resolves a single resource quantity.

        Structured quantities are rendered to their canonical string, raw strings
        and plain numbers are passed through untouched and the default is only used
        when no value was given. Returns None when the field should be left out.
    """
    if isinstance(value, (Cpu, Size)):
        return value.as_string()
    if isinstance(value, (str, int, float)):
        return value
    return default

def create_resource_requirements(resources: ContainerResources | None, defaults: dict[str, dict[str, str]] | None = None) -> dict[str, dict[str, Any]]:
    defaults = defaults or {}
    cpu = resources.cpu if resources and resources.cpu else CpuResources()
    memory = resources.memory if resources and resources.memory else MemoryResources()

    values = {
        'requests': {
            'cpu': cpu.request,
            'memory': memory.request,
        },
        'limits': {
            'cpu': cpu.limit,
            'memory': memory.limit,
        },
    }

    requirements = {}
    for bound, quantities in values.items():
        resolved = {}
        for resource, value in quantities.items():
            quantity = resolve_quantity(value, defaults.get(bound, {}).get(resource))
            if quantity is not None:
                resolved[resource] = quantity
        # absent rather than empty
        if resolved:
            requirements[bound] = resolved
    return requirements
