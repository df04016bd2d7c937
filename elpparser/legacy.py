"""Flat metadata extraction that walks the raw content XML directly."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Dict

from .decoder import STRING_TAGS, iter_pairs
from .markup import child_text, find_first, local_name

RECORD_FIELDS = (
    "title",
    "description",
    "author",
    "license",
    "language",
    "learning_resource_type",
)

# odeProperties documents store key/value child elements per property.
ODE_PROPERTY_KEYS = {
    "pp_title": "title",
    "pp_description": "description",
    "pp_author": "author",
    "license": "license",
    "lom_general_language": "language",
    "pp_learningResourceType": "learning_resource_type",
}

# Dictionary documents keep package attributes as top level dictionary keys.
DICTIONARY_KEYS = {
    "_title": "title",
    "_description": "description",
    "_author": "author",
    "license": "license",
    "_lang": "language",
    "_learningResourceType": "learning_resource_type",
}


def extract_legacy_metadata(root: ET.Element) -> Dict[str, str]:
    """Return the flat record fields found in a content document."""
    fields = {name: "" for name in RECORD_FIELDS}

    properties = find_first(root, "odeProperties")
    if properties is not None:
        fields.update(_from_ode_properties(properties))
        return fields

    dictionary = find_first(root, "dictionary")
    if dictionary is not None:
        fields.update(_from_dictionary(dictionary))
    return fields


def _from_ode_properties(properties: ET.Element) -> Dict[str, str]:
    found: Dict[str, str] = {}
    for prop in properties:
        if local_name(prop) != "odeProperty":
            continue
        target = ODE_PROPERTY_KEYS.get(child_text(prop, "key"))
        if target is not None:
            found[target] = child_text(prop, "value")
    return found


def _from_dictionary(dictionary: ET.Element) -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value_element in iter_pairs(dictionary):
        if local_name(value_element) in STRING_TAGS:
            flat[key] = value_element.get("value", "")
    return {target: flat.get(key, "") for key, target in DICTIONARY_KEYS.items()}


__all__ = ["RECORD_FIELDS", "extract_legacy_metadata"]
