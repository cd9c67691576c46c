"""codeweave -- deterministic C# source generation.

Two text-assembly engines:

- :mod:`codeweave.builder` builds a source tree (usings, namespaces, types,
  fields, constructors, methods) and renders it with consistent indentation
  and blank-line spacing.
- :mod:`codeweave.templating` expands constant ``$Token`` templates against
  values derived from a descriptor.

:mod:`codeweave.generators` combines both to turn descriptors into
``CodeGenFile`` artifacts.

Quick usage::

    from codeweave import CodeGenerator, ComponentDescriptor, MemberInfo

    descriptor = ComponentDescriptor(
        full_type_name="PositionComponent",
        containers=["Core"],
        members=[MemberInfo(name="x", type="float")],
    )
    files = CodeGenerator().run([descriptor])
"""

from codeweave.generators import CodeGenerator
from codeweave.models import CodeGenFile, ComponentDescriptor, MemberInfo, PoolDescriptor

__all__ = [
    "CodeGenFile",
    "CodeGenerator",
    "ComponentDescriptor",
    "MemberInfo",
    "PoolDescriptor",
]
