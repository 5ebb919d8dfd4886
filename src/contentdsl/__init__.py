"""contentDSL - Self-describing, tagged serialization for UI content trees."""

from contentdsl.errors import (
    DecodeError,
    DepthExceeded,
    InvalidEnumValue,
    MissingField,
    TypeMismatch,
    UnknownVariant,
)
from contentdsl.nodes import (
    AnyComponent,
    Button,
    ButtonAction,
    # Core types
    Component,
    Group,
    Image,
    Stack,
    Style,
    Text,
    identity,
)
from contentdsl.schema import (
    ComponentSchema,
    FieldSchema,
    all_schemas,
    component_schema,
    export_schema,
    extract_type,
)
from contentdsl.serialization import (
    DEFAULT_MAX_DEPTH,
    from_dict,
    from_json,
    structurally_equal,
    # Serialization
    to_dict,
    to_json,
)
from contentdsl.tags import (
    ALIASES,
    # Tag registry
    ComponentTag,
    component_class,
    resolve,
)

__all__ = [
    "ALIASES",
    "DEFAULT_MAX_DEPTH",
    "AnyComponent",
    "Button",
    "ButtonAction",
    # Core types
    "Component",
    "ComponentSchema",
    # Tag registry
    "ComponentTag",
    # Errors
    "DecodeError",
    "DepthExceeded",
    "FieldSchema",
    "Group",
    "Image",
    "InvalidEnumValue",
    "MissingField",
    "Stack",
    "Style",
    "Text",
    "TypeMismatch",
    "UnknownVariant",
    "all_schemas",
    "component_class",
    "component_schema",
    "export_schema",
    # Schema extraction
    "extract_type",
    "from_dict",
    "from_json",
    "identity",
    "resolve",
    "structurally_equal",
    # Serialization
    "to_dict",
    "to_json",
]
