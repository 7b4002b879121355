"""Convert an HTML task list into mdast JSON."""

from migas import to_json, to_mdast
from migas.html import parse_fragment

source = """<ul>
  <li><input type="checkbox" checked> Write the parser</li>
  <li><input type="checkbox"> Write the docs</li>
  <li>
    <p>Release</p>
    <p>Tag the commit and upload.</p>
  </li>
</ul>
"""

tree = to_mdast(parse_fragment(source))
print(to_json(tree, indent=2))
