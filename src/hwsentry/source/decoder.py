"""
Decoding of the hardware monitor's ``data.json`` payload.

The payload is a free-form tree: every node carries ``Text``, ``Value``,
``Min``, ``Max`` and ``Children``. Only the leaf/branch distinction is relied
upon; everything else is coerced to strings for display.
"""

from typing import Any, Mapping, Optional

from ..models.sensors import RawSensorNode
from ..validation import SourceUnavailable


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def decode_sensor_tree(payload: Any, path: str = "root") -> RawSensorNode:
    """Decode a JSON payload into a RawSensorNode tree.

    Args:
        payload: The parsed JSON body (a mapping for every node).
        path: Location of the node, used in error messages.

    Returns:
        The decoded root node.

    Raises:
        SourceUnavailable: If a node is not a mapping or ``Children`` is not a list.
    """
    if not isinstance(payload, Mapping):
        raise SourceUnavailable(
            f"Malformed sensor data at {path}: expected an object, got {type(payload).__name__}"
        )

    children_data = payload.get("Children") or []
    if not isinstance(children_data, list):
        raise SourceUnavailable(
            f"Malformed sensor data at {path}: 'Children' must be a list"
        )

    children = tuple(
        decode_sensor_tree(child, f"{path}/{index}")
        for index, child in enumerate(children_data)
    )
    return RawSensorNode(
        name=_as_text(payload.get("Text")) or "",
        value=_as_text(payload.get("Value")) or "",
        children=children,
        min=_as_text(payload.get("Min")),
        max=_as_text(payload.get("Max")),
    )
