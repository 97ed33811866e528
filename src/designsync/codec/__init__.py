"""Token codec: design values <-> utility class tokens."""

from designsync.codec.cascade import InheritedValue, get_inherited_value
from designsync.codec.conflicts import (
    remove_property_classes,
    replace_conflicting_classes,
    set_breakpoint_class,
)
from designsync.codec.decode import (
    decode_class_value,
    extract_arbitrary_value,
    extract_bg_img_var_name,
    map_class_to_design_value,
)
from designsync.codec.mapper import property_to_class
from designsync.codec.properties import PROPERTY_SPECS, PropertySpec, ValueKind, get_spec, property_of

__all__ = [
    "InheritedValue",
    "PROPERTY_SPECS",
    "PropertySpec",
    "ValueKind",
    "decode_class_value",
    "extract_arbitrary_value",
    "extract_bg_img_var_name",
    "get_inherited_value",
    "get_spec",
    "map_class_to_design_value",
    "property_of",
    "property_to_class",
    "remove_property_classes",
    "replace_conflicting_classes",
    "set_breakpoint_class",
]
