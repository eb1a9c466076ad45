"""Component type registry: semantic type -> library-specific element names."""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

# type -> library group -> literal element names
DEFAULT_MAPPINGS: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "form": {
        "native": ("form",),
        "quasar": ("q-form", "QForm"),
        "material": ("v-form", "VForm", "Form", "MuiForm"),
    },
    "button": {
        "native": ("button",),
        "quasar": ("q-btn", "QBtn"),
        "material": ("v-btn", "VBtn", "Button", "MuiButton"),
    },
    "dialog": {
        "native": ("dialog",),
        "quasar": ("q-dialog", "QDialog"),
        "material": ("v-dialog", "VDialog", "Dialog", "MuiDialog"),
    },
}


class ComponentRegistry:
    """Read-only mapping of component types to element names.

    Never mutated after construction, so scanner workers share one
    instance without locking.
    """

    def __init__(self, mappings: Optional[Mapping[str, Mapping[str, Tuple[str, ...]]]] = None):
        source = DEFAULT_MAPPINGS if mappings is None else mappings
        self._mappings = MappingProxyType(
            {
                type_name.lower(): MappingProxyType(
                    {library: tuple(names) for library, names in groups.items()}
                )
                for type_name, groups in source.items()
            }
        )
        # Lowercased name sets for classification
        self._names = MappingProxyType(
            {
                type_name: frozenset(
                    name.lower() for names in groups.values() for name in names
                )
                for type_name, groups in self._mappings.items()
            }
        )

    @property
    def known_types(self) -> Tuple[str, ...]:
        return tuple(self._mappings)

    def lookup(self, component_type: str) -> Tuple[Mapping[str, Tuple[str, ...]], bool]:
        """Return the library-group table for a type and whether it exists.

        Args:
            component_type: Semantic type, matched case-insensitively

        Returns:
            (mapping, found); mapping is empty when not found
        """
        groups = self._mappings.get(component_type.lower())
        if groups is None:
            return MappingProxyType({}), False
        return groups, True

    def classify(self, component_name: str, component_type: str) -> bool:
        """Check whether an element name realizes the requested type.

        Known types match any registered name; unknown types match the
        element name against the type string itself. Both comparisons are
        exact and case-insensitive.
        """
        names = self._names.get(component_type.lower())
        if names is None:
            return component_name.lower() == component_type.lower()
        return component_name.lower() in names


_default_registry: Optional[ComponentRegistry] = None


def default_registry() -> ComponentRegistry:
    """Return the process-wide registry built from DEFAULT_MAPPINGS."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ComponentRegistry()
    return _default_registry


__all__ = ["ComponentRegistry", "DEFAULT_MAPPINGS", "default_registry"]
