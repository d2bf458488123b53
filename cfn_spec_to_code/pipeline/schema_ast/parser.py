"""
Resource specification loader.

Phase 1 of the pipeline: decode the specification document into
TypeSpec nodes without resolving names or types.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..errors import SchemaLoadError
from .nodes import PrimitiveType, PropertySpec, ResourceSpecification, TypeSpec, UpdateType

logger = logging.getLogger(__name__)

RESOURCE_TYPES_KEY = "ResourceTypes"
PROPERTY_TYPES_KEY = "PropertyTypes"
VERSION_KEY = "ResourceSpecificationVersion"

# Accepted spellings for each property attribute
_PROPERTY_KEYS = {
    "required": ("Required", "required"),
    "documentation": ("Documentation", "documentation"),
    "primitive_type": ("PrimitiveType", "primitiveType"),
    "update_type": ("UpdateType", "updateType"),
    "type": ("Type", "type"),
    "item_type": ("ItemType", "itemType"),
    "primitive_item_type": ("PrimitiveItemType", "primitiveItemType"),
}

_TYPE_KEYS = {
    "documentation": ("Documentation", "documentation"),
    "properties": ("Properties", "properties"),
}

_MISSING = object()


class SchemaLoader:
    """Loads a resource specification into TypeSpec nodes."""

    def __init__(self, include_resource_types: bool = True, include_property_types: bool = True, ignore_types: list[str] | None = None):
        """
        Initialize the loader.

        Args:
            include_resource_types: Whether to load the ResourceTypes grouping
            include_property_types: Whether to load the PropertyTypes grouping
            ignore_types: Qualified names to skip
        """
        self.include_resource_types = include_resource_types
        self.include_property_types = include_property_types
        self.ignore_types = set(ignore_types or [])

    def load_file(self, path: str | Path) -> ResourceSpecification:
        """Read and decode a specification file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except OSError as e:
            raise SchemaLoadError(f"Cannot read specification {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise SchemaLoadError(f"Specification {path} is not valid JSON: {e}") from e
        return self.load(document)

    def load(self, document: Any) -> ResourceSpecification:
        """
        Load an already decoded specification document.

        Args:
            document: Mapping with ResourceTypes and/or PropertyTypes groupings

        Returns:
            ResourceSpecification with one TypeSpec per qualified name
        """
        if not isinstance(document, dict):
            raise SchemaLoadError(f"Specification must be a JSON object, got {type(document).__name__}")
        if RESOURCE_TYPES_KEY not in document and PROPERTY_TYPES_KEY not in document:
            raise SchemaLoadError(f"Specification has neither {RESOURCE_TYPES_KEY} nor {PROPERTY_TYPES_KEY}")

        version = document.get(VERSION_KEY, "")
        if not isinstance(version, str):
            raise SchemaLoadError(f"{VERSION_KEY} must be a string")

        spec = ResourceSpecification(version=version)
        groupings = []
        if self.include_resource_types:
            groupings.append((RESOURCE_TYPES_KEY, "resource"))
        if self.include_property_types:
            groupings.append((PROPERTY_TYPES_KEY, "property"))

        seen: set[str] = set()
        for key, kind in groupings:
            definitions = document.get(key, {})
            if not isinstance(definitions, dict):
                raise SchemaLoadError(f"{key} must be an object mapping type names to definitions")
            for name, definition in definitions.items():
                if name in self.ignore_types:
                    logger.debug("Skipping ignored type %s", name)
                    continue
                if name in seen:
                    raise SchemaLoadError(f"Type {name!r} is defined more than once")
                seen.add(name)
                spec.types.append(self._parse_type(name, definition, kind))

        resources = sum(1 for t in spec.types if t.kind == "resource")
        logger.info(
            "Loaded %d resource types and %d property types from specification %s",
            resources,
            len(spec.types) - resources,
            version or "(unversioned)",
        )
        return spec

    def _parse_type(self, name: str, definition: Any, kind: str) -> TypeSpec:
        """Parse one type definition."""
        if not isinstance(definition, dict):
            raise SchemaLoadError(f"Definition of {name!r} must be an object")

        documentation = self._get(definition, _TYPE_KEYS["documentation"], "") or ""
        if not isinstance(documentation, str):
            raise SchemaLoadError(f"Documentation of {name!r} must be a string")

        raw_properties = self._get(definition, _TYPE_KEYS["properties"], {})
        if not isinstance(raw_properties, dict):
            raise SchemaLoadError(f"Properties of {name!r} must be an object")

        properties = {prop_name: self._parse_property(f"{name}/{prop_name}", prop) for prop_name, prop in raw_properties.items()}
        return TypeSpec(name=name, documentation=documentation, properties=properties, kind=kind)

    def _parse_property(self, path: str, prop: Any) -> PropertySpec:
        """Parse one property definition."""
        if not isinstance(prop, dict):
            raise SchemaLoadError(f"Property {path} must be an object")

        required = self._get(prop, _PROPERTY_KEYS["required"], _MISSING)
        if required is _MISSING:
            raise SchemaLoadError(f"Property {path} is missing Required")
        if not isinstance(required, bool):
            raise SchemaLoadError(f"Required of property {path} must be a boolean")

        documentation = self._get(prop, _PROPERTY_KEYS["documentation"], "")
        primitive_type = self._get(prop, _PROPERTY_KEYS["primitive_type"], None)
        update_type = self._get(prop, _PROPERTY_KEYS["update_type"], None)
        type_ = self._get(prop, _PROPERTY_KEYS["type"], None)
        item_type = self._get(prop, _PROPERTY_KEYS["item_type"], None)
        primitive_item_type = self._get(prop, _PROPERTY_KEYS["primitive_item_type"], None)

        for attr, value in (("Documentation", documentation), ("Type", type_), ("ItemType", item_type)):
            if value is not None and not isinstance(value, str):
                raise SchemaLoadError(f"{attr} of property {path} must be a string")

        return PropertySpec(
            required=required,
            documentation=documentation or "",
            primitive_type=self._parse_enum(PrimitiveType, primitive_type, PrimitiveType.STRING, path),
            update_type=self._parse_enum(UpdateType, update_type, UpdateType.IMMUTABLE, path),
            type=type_ or None,
            item_type=item_type or None,
            primitive_item_type=self._parse_enum(PrimitiveType, primitive_item_type, None, path),
        )

    @staticmethod
    def _get(d: dict, keys: tuple[str, ...], default: Any) -> Any:
        """Return the value of the first present key."""
        for key in keys:
            if key in d:
                return d[key]
        return default

    @staticmethod
    def _parse_enum(enum_cls, value: Any, default: Any, path: str) -> Any:
        """Convert a tag string into an enum member."""
        if value is None:
            return default
        try:
            return enum_cls(value)
        except ValueError:
            allowed = ", ".join(m.value for m in enum_cls)
            raise SchemaLoadError(f"Property {path} has unknown {enum_cls.__name__} {value!r} (expected one of {allowed})") from None
