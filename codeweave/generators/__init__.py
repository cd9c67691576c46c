"""codeweave generators.

Key classes:
    CodeGenerator                 - Dispatches descriptors to generators by kind
    ComponentExtensionsGenerator  - Entity/pool accessors and matchers per component
    PoolAttributeGenerator        - One attribute class per pool name
"""

from .base import BaseGenerator
from .component_extensions import ComponentExtensionsGenerator
from .orchestrator import CodeGenerator, default_generators
from .pool_attribute import PoolAttributeGenerator

__all__ = [
    "BaseGenerator",
    "CodeGenerator",
    "ComponentExtensionsGenerator",
    "PoolAttributeGenerator",
    "default_generators",
]
