"""
Configuration Documents.

In-memory shapes of the JSON configuration documents carried inside
WrappedJsonProto records:

- ConfTree: one configuration tree (global options + per-component options)
- AggregateConf: the resources / internal / appConf trees of one application
- ConfTreeOperations: read and update operations over a ConfTree

Design:
- Pydantic models so the same classes validate incoming JSON and render it back
- Unknown keys are ignored; option values that arrive as JSON scalars are
  kept as strings, the way the Slider JSON serializer stores them
- A null option value is kept as None and reads as unset
- Nothing here checks configuration semantics
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slider_api.domain.exceptions import MissingOptionError

CONF_TREE_SCHEMA = "http://example.org/specification/v2.0.0"


def _scalar_to_str(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


def _coerce_options(value: Any) -> Any:
    # Non-dicts are left for pydantic to reject
    if value is None:
        return {}
    if not isinstance(value, dict):
        return value
    return {key: _scalar_to_str(item) for key, item in value.items()}


# ═══════════════════════════════════════════════════════════════════════════════
# ConfTree
# ═══════════════════════════════════════════════════════════════════════════════


class ConfTree(BaseModel):
    """
    A configuration tree.

    Attributes:
        schema_uri: Schema the document claims to follow (JSON key "schema")
        metadata: Free-form metadata
        global_options: Options shared by every component (JSON key "global")
        components: Per-component option maps
        credentials: Credential provider paths mapped to aliases
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    schema_uri: str = Field(default=CONF_TREE_SCHEMA, alias="schema")
    metadata: Dict[str, Any] = Field(default_factory=dict)
    global_options: Dict[str, Optional[str]] = Field(default_factory=dict, alias="global")
    components: Dict[str, Dict[str, Optional[str]]] = Field(default_factory=dict)
    credentials: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("global_options", mode="before")
    @classmethod
    def coerce_global_options(cls, v: Any) -> Any:
        return _coerce_options(v)

    @field_validator("components", mode="before")
    @classmethod
    def coerce_component_options(cls, v: Any) -> Any:
        if v is None:
            return {}
        if not isinstance(v, dict):
            return v
        return {name: _coerce_options(options) for name, options in v.items()}

    @field_validator("metadata", "credentials", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    def to_json(self) -> str:
        """Serialize with the wire key names."""
        return self.model_dump_json(by_alias=True)


# ═══════════════════════════════════════════════════════════════════════════════
# ConfTreeOperations
# ═══════════════════════════════════════════════════════════════════════════════


class ConfTreeOperations:
    """
    Operations over a ConfTree.

    Reads never modify the tree. Writes update the wrapped tree in place.

    Usage:
        ops = ConfTreeOperations(tree)
        heap = ops.get_component_opt("worker", "yarn.memory", "256")
        ops.set_component_opt("worker", "yarn.component.instances", 3)
    """

    def __init__(self, conf_tree: ConfTree):
        self._conf_tree = conf_tree

    @property
    def conf_tree(self) -> ConfTree:
        return self._conf_tree

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfTreeOperations):
            return NotImplemented
        return self._conf_tree == other._conf_tree

    def __repr__(self) -> str:
        return f"ConfTreeOperations({self._conf_tree!r})"

    # ─── Global options ───────────────────────────────────────────────────

    def get_global_options(self) -> Dict[str, Optional[str]]:
        return self._conf_tree.global_options

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._conf_tree.global_options.get(key)
        return default if value is None else value

    def get_mandatory_option(self, key: str) -> str:
        """
        Get a global option that must be present.

        Raises:
            MissingOptionError: If the option is not set or is null
        """
        value = self._conf_tree.global_options.get(key)
        if value is None:
            raise MissingOptionError(key)
        return value

    def set_global_opt(self, key: str, value: Any) -> None:
        self._conf_tree.global_options[key] = str(_scalar_to_str(value))

    # ─── Component options ────────────────────────────────────────────────

    def get_component_names(self) -> List[str]:
        return list(self._conf_tree.components.keys())

    def get_component(self, name: str) -> Optional[Dict[str, Optional[str]]]:
        return self._conf_tree.components.get(name)

    def get_or_add_component(self, name: str) -> Dict[str, Optional[str]]:
        return self._conf_tree.components.setdefault(name, {})

    def get_component_opt(
        self,
        component: str,
        key: str,
        default: Optional[str] = None,
    ) -> Optional[str]:
        options = self._conf_tree.components.get(component)
        if options is None:
            return default
        value = options.get(key)
        return default if value is None else value

    def get_mandatory_component_opt(self, component: str, key: str) -> str:
        """
        Get a component option that must be present.

        Raises:
            MissingOptionError: If the component or the option is absent or null
        """
        value = self.get_component_opt(component, key)
        if value is None:
            raise MissingOptionError(key, component=component)
        return value

    def get_component_opt_int(self, component: str, key: str, default: int) -> int:
        value = self.get_component_opt(component, key)
        if value is None:
            return default
        return int(value)

    def set_component_opt(self, component: str, key: str, value: Any) -> None:
        self.get_or_add_component(component)[key] = str(_scalar_to_str(value))

    def resolve(self) -> None:
        """Copy global options into every component that does not override them."""
        for options in self._conf_tree.components.values():
            for key, value in self._conf_tree.global_options.items():
                options.setdefault(key, value)


# ═══════════════════════════════════════════════════════════════════════════════
# AggregateConf
# ═══════════════════════════════════════════════════════════════════════════════


class AggregateConf(BaseModel):
    """
    The full configuration of one application.

    Attributes:
        name: Application name
        resources: Resource requirements per component
        internal: Slider-internal settings
        app_conf: Application configuration (JSON key "appConf")
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    resources: ConfTree = Field(default_factory=ConfTree)
    internal: ConfTree = Field(default_factory=ConfTree)
    app_conf: ConfTree = Field(default_factory=ConfTree, alias="appConf")

    @field_validator("resources", "internal", "app_conf", mode="before")
    @classmethod
    def null_to_empty_tree(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def resource_operations(self) -> ConfTreeOperations:
        return ConfTreeOperations(self.resources)

    @property
    def internal_operations(self) -> ConfTreeOperations:
        return ConfTreeOperations(self.internal)

    @property
    def app_conf_operations(self) -> ConfTreeOperations:
        return ConfTreeOperations(self.app_conf)

    def to_json(self) -> str:
        """Serialize with the wire key names."""
        return self.model_dump_json(by_alias=True)
