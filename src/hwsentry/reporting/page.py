"""
Shared HTML page scaffolding for the generated reports.
"""

from html import escape

_STYLE = """
body { font-family: "Segoe UI", Helvetica, Arial, sans-serif; margin: 2em; color: #222; }
h1 { border-bottom: 2px solid #444; padding-bottom: 0.3em; }
h2 { margin-top: 1.6em; color: #333; }
table.data { border-collapse: collapse; margin: 0.5em 0; min-width: 40%; }
table.data th, table.data td { border: 1px solid #ccc; padding: 4px 10px; text-align: left; }
table.data th { background: #f0f0f0; }
.meta { color: #666; }
.alerts li { color: #b00020; font-weight: bold; }
.all-clear { color: #1b7f3b; font-weight: bold; }
.status-OK { color: #1b7f3b; }
.status-Critical, .status-Error { color: #b00020; font-weight: bold; }
.status-HighUsage { color: #c76b00; font-weight: bold; }
.status-Unavailable { color: #777; }
ul.tree { list-style: none; padding-left: 1.2em; border-left: 1px dotted #bbb; }
ul.tree li { margin: 2px 0; }
.node-name { font-weight: bold; }
.node-value { color: #0b5394; margin-left: 0.6em; }
.node-range { color: #888; margin-left: 0.6em; font-size: 0.9em; }
"""


def render_page(title: str, body: str) -> str:
    """Wrap an HTML body fragment into a complete UTF-8 document."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
        f"<title>{escape(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n<body>\n"
        f"<h1>{escape(title)}</h1>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )
