"""Entity, pool and matcher extensions for components.

For every component descriptor with ``generate_methods`` set, emits one file
laid out as::

    usings
    [component class]              generate_component
    entity accessors per pool      add/has/replace/remove, or singleton toggle
    [pool accessors]               is_single_entity, first pool only
    matcher per pool

Per-pool blocks are expanded once per container in container order; only the
``$Tag`` and ``$Ids`` values differ between them.
"""

from __future__ import annotations

from collections.abc import Sequence

from codeweave.builder import DEFAULT_INDENT, AccessModifier, FileBuilder
from codeweave.errors import DescriptorPreconditionError
from codeweave.models import DEFAULT_LOOKUP_SUFFIX, CodeGenFile, ComponentDescriptor
from codeweave.templating import TemplateRenderer, expand_for_descriptor, expand_per_container

from .base import BaseGenerator

ARTIFACT_SUFFIX = "GeneratedExtension"
DEFAULT_USINGS: tuple[str, ...] = ("Entitas",)


# ---------------------------------------------------------------------------
# Entity templates
# ---------------------------------------------------------------------------

ENTITY_CLASS_HEADER = "\npublic partial class $Tag : Entity {\n"

ENTITY_GETTER = """
    public $Type $name { get { return ($Type)GetComponent($Ids.$Name); } }
"""

ENTITY_SINGLETON_INSTANCE = """
    static readonly $Type $nameComponent = new $Type();
"""

ENTITY_HAS = """
    public bool has$Name { get { return HasComponent($Ids.$Name); } }
"""

ENTITY_SINGLETON_TOGGLE = """
    public bool $prefix$Name {
        get { return HasComponent($Ids.$Name); }
        set {
            if(value != $prefix$Name) {
                if(value) {
                    AddComponent($Ids.$Name, $nameComponent);
                } else {
                    RemoveComponent($Ids.$Name);
                }
            }
        }
    }

    public $Tag $Prefix$Name(bool value) {
        $prefix$Name = value;
        return this;
    }
"""

ENTITY_ADD = """
    public $Tag Add$Name($typedArgs) {
        var component = CreateComponent<$Type>($Ids.$Name);
$assign
        AddComponent($Ids.$Name, component);
        return this;
    }
"""

ENTITY_REPLACE = """
    public $Tag Replace$Name($typedArgs) {
        var component = CreateComponent<$Type>($Ids.$Name);
$assign
        ReplaceComponent($Ids.$Name, component);
        return this;
    }
"""

ENTITY_REMOVE = """
    public $Tag Remove$Name() {
        RemoveComponent($Ids.$Name);
        return this;
    }
"""

CLOSE_CLASS = "}\n"


# ---------------------------------------------------------------------------
# Pool templates
# ---------------------------------------------------------------------------

POOL_CLASS_HEADER = "\npublic partial class $TagPool : Pool<$Tag> {\n"

POOL_SINGLETON_GETTER = """
    public $Tag $nameEntity { get { return GetGroup($TagMatcher.$Name).GetSingleEntity(); } }
"""

POOL_GETTER = """
    public $Tag $nameEntity { get { return GetGroup($TagMatcher.$Name).GetSingleEntity(); } }

    public $Type $name { get { return $nameEntity.$name; } }
"""

POOL_SINGLETON_TOGGLE = """
    public bool $prefix$Name {
        get { return $nameEntity != null; }
        set {
            var entity = $nameEntity;
            if(value != (entity != null)) {
                if(value) {
                    CreateEntity().$prefix$Name = true;
                } else {
                    DestroyEntity(entity);
                }
            }
        }
    }
"""

POOL_HAS = """
    public bool has$Name { get { return $nameEntity != null; } }
"""

POOL_SET = """
    public $Tag Set$Name($typedArgs) {
        if(has$Name) {
            throw new EntitasException("Could not set $name!\\n" + this + " already has an entity with $Type!",
                "You should check if the pool already has a $nameEntity before setting it or use pool.Replace$Name().");
        }
        var entity = CreateEntity();
        entity.Add$Name($args);
        return entity;
    }
"""

POOL_REPLACE = """
    public $Tag Replace$Name($typedArgs) {
        var entity = $nameEntity;
        if(entity == null) {
            entity = Set$Name($args);
        } else {
            entity.Replace$Name($args);
        }

        return entity;
    }
"""

POOL_REMOVE = """
    public void Remove$Name() {
        DestroyEntity($nameEntity);
    }
"""


# ---------------------------------------------------------------------------
# Matcher template
# ---------------------------------------------------------------------------

# The cached matcher is created on first access and never replaced.  A host
# that can race on first access must guard this initialisation itself.
MATCHER = """
public partial class $TagMatcher {

    static IMatcher<$Tag> _matcher$Name;

    public static IMatcher<$Tag> $Name {
        get {
            if(_matcher$Name == null) {
                var matcher = (Matcher<$Tag>)Matcher<$Tag>.AllOf($Ids.$Name);
                matcher.componentNames = $Ids.componentNames;
                _matcher$Name = matcher;
            }

            return _matcher$Name;
        }
    }
}
"""


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ComponentExtensionsGenerator(BaseGenerator):
    """Generates entity/pool accessors and matchers for component descriptors.

    *indent* applies to the inline component declaration built with
    :class:`FileBuilder`; *lookup_suffix* names the lookup class for
    descriptors without explicit lookup tags (``Core`` -> ``CoreComponentIds``).
    """

    kind = "component"

    def __init__(
        self,
        usings: Sequence[str] = DEFAULT_USINGS,
        renderer: TemplateRenderer | None = None,
        indent: str = DEFAULT_INDENT,
        lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX,
    ) -> None:
        self.usings = list(usings)
        self.renderer = renderer or TemplateRenderer()
        self.indent = indent
        self.lookup_suffix = lookup_suffix

    def generate(self, descriptors: Sequence[ComponentDescriptor]) -> list[CodeGenFile]:
        """Generate one extension file per participating descriptor.

        Descriptors with ``generate_methods`` unset produce nothing.

        Raises:
            DescriptorPreconditionError: If a participating descriptor is
                malformed (see :func:`check_preconditions`).
        """
        return [
            CodeGenFile(
                file_name=descriptor.full_type_name + ARTIFACT_SUFFIX,
                file_content=self.generate_extension(descriptor),
                generator_name=self.generator_name,
            )
            for descriptor in descriptors
            if descriptor.generate_methods
        ]

    def generate_extension(self, descriptor: ComponentDescriptor) -> str:
        check_preconditions(descriptor)
        body = ""
        if descriptor.generate_component:
            body += component_declaration(descriptor, self.indent)
        body += entity_methods(descriptor, self.lookup_suffix)
        if descriptor.is_single_entity:
            body += pool_methods(descriptor, self.lookup_suffix)
        body += matchers(descriptor, self.lookup_suffix)
        usings = self.renderer.render_usings(self.usings)
        if not usings:
            # Blocks open with a separator line that only follows a preamble.
            return body.removeprefix("\n")
        return usings + body


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

def check_preconditions(descriptor: ComponentDescriptor) -> None:
    """Fail fast on descriptors the templates cannot be expanded for."""
    if descriptor.generate_component and not descriptor.members:
        raise DescriptorPreconditionError(
            descriptor.full_type_name,
            "cannot declare the component type inline without members",
        )
    if descriptor.is_singleton and not descriptor.containers:
        raise DescriptorPreconditionError(
            descriptor.full_type_name,
            "singleton component must belong to at least one pool",
        )
    if descriptor.is_single_entity and not descriptor.containers:
        raise DescriptorPreconditionError(
            descriptor.full_type_name,
            "single-entity component must belong to at least one pool",
        )


def component_declaration(descriptor: ComponentDescriptor, indent: str = DEFAULT_INDENT) -> str:
    """Declare the component class with one public field.

    Only the first member is declared; further members are ignored.
    """
    member = descriptor.members[0]
    builder = FileBuilder(indent=indent)
    (
        builder.no_namespace()
        .add_type(descriptor.full_type_name)
        .add_modifier(AccessModifier.PUBLIC)
        .set_base_type("IComponent")
        .add_field(member.type, member.name)
        .add_modifier(AccessModifier.PUBLIC)
    )
    return "\n" + builder.render() + "\n"


def entity_methods(
    descriptor: ComponentDescriptor, lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX
) -> str:
    if descriptor.is_singleton:
        body = ENTITY_SINGLETON_INSTANCE + ENTITY_SINGLETON_TOGGLE
    else:
        body = ENTITY_GETTER + ENTITY_HAS + ENTITY_ADD + ENTITY_REPLACE + ENTITY_REMOVE
    return expand_per_container(ENTITY_CLASS_HEADER + body + CLOSE_CLASS, descriptor, lookup_suffix)


def pool_methods(
    descriptor: ComponentDescriptor, lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX
) -> str:
    """Pool-scope accessors for the first pool of a single-entity component."""
    if descriptor.is_singleton:
        body = POOL_SINGLETON_GETTER + POOL_SINGLETON_TOGGLE
    else:
        body = POOL_GETTER + POOL_HAS + POOL_SET + POOL_REPLACE + POOL_REMOVE
    return expand_for_descriptor(
        POOL_CLASS_HEADER + body + CLOSE_CLASS, descriptor, 0, lookup_suffix
    )


def matchers(descriptor: ComponentDescriptor, lookup_suffix: str = DEFAULT_LOOKUP_SUFFIX) -> str:
    return expand_per_container(MATCHER, descriptor, lookup_suffix)
