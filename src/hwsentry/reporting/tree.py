"""
Raw sensor tree report rendering.

Shows the tree exactly as the hardware monitor reported it, including the
display-only minimum and maximum of every node.
"""

from html import escape

from ..models.sensors import RawSensorNode
from .page import render_page


def _render_node(node: RawSensorNode) -> str:
    parts = [f'<span class="node-name">{escape(node.name or "(unnamed)")}</span>']
    if node.value:
        parts.append(f'<span class="node-value">{escape(node.value)}</span>')
    if node.min or node.max:
        parts.append(
            f'<span class="node-range">min {escape(node.min or "-")} / '
            f'max {escape(node.max or "-")}</span>'
        )
    if node.children:
        children = "".join(_render_node(child) for child in node.children)
        parts.append(f'<ul class="tree">{children}</ul>')
    return f"<li>{''.join(parts)}</li>"


def count_nodes(root: RawSensorNode) -> int:
    return sum(1 for _ in root.iter_nodes())


def render_sensor_tree_report(root: RawSensorNode, timestamp: str, source_url: str) -> str:
    """Render the full sensor tree as a nested HTML list."""
    body = (
        f'<p class="meta">Run {escape(timestamp)} &middot; source {escape(source_url)} '
        f"&middot; {count_nodes(root)} nodes</p>\n"
        f'<ul class="tree">{_render_node(root)}</ul>'
    )
    return render_page("Sensor Tree", body)
