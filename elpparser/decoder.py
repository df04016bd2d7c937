"""Decoder for the dictionary-based persistence format used in content XML.

Every element encodes one value. Leaves carry their payload in a ``value``
attribute, composites nest child elements:

``unicode``/``string``
    text
``int``
    signed integer
``bool``
    ``True`` only when ``value`` is ``"1"``
``list``
    one item per child element
``dictionary``
    alternating key/value children, keys being ``string``/``unicode``
    elements with ``role="key"``
``instance``
    an object wrapping a ``dictionary``; decoded as that dictionary
``reference``
    a pointer to an instance serialized elsewhere in the document
``none``
    ``None``

Unknown tags decode to ``None``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .config import DEFAULT_MAX_DEPTH
from .errors import ElpFormatError
from .markup import local_name
from .models import GenericValue, Reference

STRING_TAGS = frozenset({"string", "unicode"})


def is_key_element(element: ET.Element) -> bool:
    return local_name(element) in STRING_TAGS and element.get("role") == "key"


def iter_pairs(element: ET.Element) -> Iterator[Tuple[str, ET.Element]]:
    """Yield ``(key, value_element)`` pairs from a dictionary element.

    A value without a pending key and a trailing key without a value are
    skipped.
    """
    pending: Optional[str] = None
    for child in element:
        if pending is None:
            if is_key_element(child):
                pending = child.get("value", "")
            continue
        yield pending, child
        pending = None


def parse_int(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        return 0


class ValueDecoder:
    """Converts markup subtrees into generic Python values.

    ``instances`` maps the ``reference`` attribute of every decoded instance
    to its value, letting callers resolve :class:`Reference` objects after
    a decode. A decoder is meant to be used for a single document.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.max_depth = max_depth
        self.instances: Dict[str, GenericValue] = {}
        self._handlers: Dict[str, Callable[[ET.Element, int], GenericValue]] = {
            "unicode": self._decode_string,
            "string": self._decode_string,
            "int": self._decode_int,
            "bool": self._decode_bool,
            "list": self._decode_list,
            "dictionary": self._decode_dictionary,
            "instance": self._decode_instance,
            "none": self._decode_none,
            "reference": self._decode_reference,
        }

    def decode(self, element: ET.Element) -> GenericValue:
        try:
            return self._decode(element, 0)
        except RecursionError as exc:
            raise self._too_deep() from exc

    def decode_dictionary(self, element: ET.Element) -> Dict[str, Any]:
        try:
            return self._decode_dictionary(element, 0)
        except RecursionError as exc:
            raise self._too_deep() from exc

    def resolve(self, value: GenericValue) -> GenericValue:
        """Follow a reference to the instance it names, if it was decoded."""
        if isinstance(value, Reference):
            return self.instances.get(value.key)
        return value

    def _decode(self, element: ET.Element, depth: int) -> GenericValue:
        if depth > self.max_depth:
            raise self._too_deep()
        handler = self._handlers.get(local_name(element))
        if handler is None:
            return None
        return handler(element, depth)

    def _too_deep(self) -> ElpFormatError:
        return ElpFormatError(f"Content nesting exceeds the maximum depth of {self.max_depth}")

    def _decode_string(self, element: ET.Element, depth: int) -> str:
        return element.get("value", "")

    def _decode_int(self, element: ET.Element, depth: int) -> int:
        return parse_int(element.get("value", ""))

    def _decode_bool(self, element: ET.Element, depth: int) -> bool:
        return element.get("value") == "1"

    def _decode_list(self, element: ET.Element, depth: int) -> List[GenericValue]:
        return [self._decode(child, depth + 1) for child in element]

    def _decode_dictionary(self, element: ET.Element, depth: int) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for key, value_element in iter_pairs(element):
            result[key] = self._decode(value_element, depth + 1)
        return result

    def _decode_instance(self, element: ET.Element, depth: int) -> GenericValue:
        value: GenericValue = None
        for child in element:
            if local_name(child) == "dictionary":
                value = self._decode(child, depth + 1)
                break
        reference = element.get("reference")
        if reference:
            self.instances[reference] = value
        return value

    def _decode_none(self, element: ET.Element, depth: int) -> None:
        return None

    def _decode_reference(self, element: ET.Element, depth: int) -> Reference:
        return Reference(key=element.get("key", ""))


__all__ = ["STRING_TAGS", "ValueDecoder", "is_key_element", "iter_pairs", "parse_int"]
