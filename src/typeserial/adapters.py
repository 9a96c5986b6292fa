"""
Interop hooks for json and PyYAML.

These are not encoders. They are the small pieces a data tree needs so that
boolean objects survive a round-trip through the stock ``json`` module and
PyYAML's safe dumper/loader:

    json:  json_default (for json.dumps(default=...)), from_native/to_native
    yaml:  BooleanSafeDumper / BooleanSafeLoader

After ``load_json`` or ``load_yaml`` every boolean leaf is the canonical
``true()`` / ``false()`` singleton.
"""
from __future__ import annotations

import json
from typing import Any

import yaml

from typeserial.boolean import Boolean, is_bool, to_bool


def json_default(obj: Any) -> Any:
    """``default=`` hook for json.dumps: boolean objects become JSON booleans."""
    if is_bool(obj):
        return bool(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_native(tree: Any) -> Any:
    """Replace boolean objects in a dict/list/tuple tree with native bools."""
    if is_bool(tree):
        return bool(tree)
    if isinstance(tree, dict):
        return {key: to_native(value) for key, value in tree.items()}
    if isinstance(tree, list):
        return [to_native(item) for item in tree]
    if isinstance(tree, tuple):
        return tuple(to_native(item) for item in tree)
    return tree


def from_native(tree: Any) -> Any:
    """Replace native bools in a dict/list/tuple tree with the canonical singletons."""
    if isinstance(tree, bool):
        return to_bool(tree)
    if isinstance(tree, dict):
        return {key: from_native(value) for key, value in tree.items()}
    if isinstance(tree, list):
        return [from_native(item) for item in tree]
    if isinstance(tree, tuple):
        return tuple(from_native(item) for item in tree)
    return tree


def represent_boolean(dumper: yaml.SafeDumper, data: Any) -> yaml.ScalarNode:
    """Representer: boolean object -> YAML ``true``/``false`` scalar."""
    return dumper.represent_bool(bool(data))


def construct_boolean(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> Boolean:
    """Constructor: YAML boolean scalar -> canonical singleton."""
    return to_bool(loader.construct_yaml_bool(node))


class BooleanSafeDumper(yaml.SafeDumper):
    """SafeDumper that writes boolean objects as YAML true/false."""

    def represent_data(self, data: Any) -> yaml.Node:
        # A foreign class bound to the shared type name can change after
        # import, so it is matched here rather than by registered type
        if is_bool(data) and not isinstance(data, Boolean):
            return represent_boolean(self, data)
        return super().represent_data(data)

    def ignore_aliases(self, data: Any) -> bool:
        # The singletons repeat all over a tree; never anchor them
        if is_bool(data):
            return True
        return super().ignore_aliases(data)


class BooleanSafeLoader(yaml.SafeLoader):
    """SafeLoader that reads YAML booleans as the canonical singletons."""
    pass


BooleanSafeDumper.add_multi_representer(Boolean, represent_boolean)
BooleanSafeLoader.add_constructor("tag:yaml.org,2002:bool", construct_boolean)


def dump_json(tree: Any) -> str:
    """Serialize ``tree`` to JSON, writing boolean objects as JSON booleans."""
    return json.dumps(tree, default=json_default, sort_keys=True)


def load_json(s: str) -> Any:
    """Parse JSON, returning booleans as the canonical singletons."""
    return from_native(json.loads(s))


def dump_yaml(tree: Any) -> str:
    """Serialize ``tree`` to YAML, writing boolean objects as YAML booleans."""
    return yaml.dump(tree, Dumper=BooleanSafeDumper)


def load_yaml(s: str) -> Any:
    """Parse YAML, returning booleans as the canonical singletons."""
    return yaml.load(s, Loader=BooleanSafeLoader)
