"""
Name resolver for qualified type names.

Splits a name such as ``AWS::EMR::Cluster.VolumeSpecification`` into the
module path it is generated in (``AWS``, ``EMR``, ``Cluster``) and the
struct name (``VolumeSpecification``).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import NameResolutionError

NAMESPACE_SEPARATOR = "::"
SUB_PROPERTY_MARKER = "."


@dataclass(frozen=True)
class TypeMetadata:
    """Result of name resolution."""

    module_path: tuple[str, ...]
    struct_name: str
    is_sub_property: bool


class NameResolver:
    """Resolves qualified names into module paths and struct names."""

    def __init__(self, separator: str = NAMESPACE_SEPARATOR, marker: str = SUB_PROPERTY_MARKER):
        """
        Initialize the resolver.

        Args:
            separator: Separator between namespace segments
            marker: Marker introducing a sub-property name in the last segment
        """
        self.separator = separator
        self.marker = marker

    def resolve(self, qualified_name: str) -> TypeMetadata:
        """
        Resolve a qualified name.

        Both ``AWS::EMR::Cluster`` and ``AWS::EMR::Cluster.VolumeSpecification``
        live in the module path ``AWS::EMR::Cluster``.

        Args:
            qualified_name: The specification key of a type

        Returns:
            TypeMetadata with module path, struct name and sub-property flag

        Raises:
            NameResolutionError: If the name has empty or missing segments
        """
        if not qualified_name:
            raise NameResolutionError(qualified_name, "name is empty")

        segments = qualified_name.split(self.separator)
        module_path = []
        for segment in segments:
            if not segment:
                raise NameResolutionError(qualified_name, "empty namespace segment")
            module_name, has_marker, sub_name = segment.partition(self.marker)
            if not module_name:
                raise NameResolutionError(qualified_name, f"segment {segment!r} has no module name before {self.marker!r}")
            if has_marker and not sub_name:
                raise NameResolutionError(qualified_name, f"segment {segment!r} has no type name after {self.marker!r}")
            module_path.append(module_name)

        last = segments[-1]
        struct_name = last.rsplit(self.marker, 1)[-1]

        return TypeMetadata(
            module_path=tuple(module_path),
            struct_name=struct_name,
            is_sub_property=self.marker in qualified_name,
        )

    def leaf_name(self, reference: str) -> str:
        """Return the struct name a type reference points at."""
        return self.resolve(reference).struct_name
