"""Typed mdast: list open tasks from an HTML page."""

from migas import to_mdast
from migas.html import parse_fragment
from migas.nodes import List, ListItem, Node, Paragraph, Text


def _plain_text(node: Node) -> str:
    if isinstance(node, Text):
        return node.value
    return "".join(_plain_text(child) for child in getattr(node, "children", ()))


def open_tasks(node: Node) -> list[str]:
    """Walk the tree and collect unchecked task items."""
    found: list[str] = []
    if isinstance(node, ListItem) and node.checked is False:
        first = node.children[0] if node.children else None
        if isinstance(first, Paragraph):
            found.append(_plain_text(first))
    for child in getattr(node, "children", ()):
        if isinstance(child, Node):
            found.extend(open_tasks(child))
    return found


source = """
<h2>Sprint</h2>
<ul>
  <li><input type="checkbox" checked> Triage bugs</li>
  <li><input type="checkbox"> Fix <b>login</b> redirect</li>
  <li><p><input type="checkbox"> Update changelog</p></li>
</ul>
"""

root = to_mdast(parse_fragment(source))
assert isinstance(root.children[1], List)

for task in open_tasks(root):
    print(f"[ ] {task}")
