"""pl0dash renderers.

Renderers serialize a finished SyntaxTree into an output format.

Available Renderers:
- XmlRenderer: nested, line-oriented tagged text (one tag per line)

Renderers hold no parsing state; all per-render state is local to each
render() call.

"""

from pl0dash.renderers.protocol import TreeRenderer
from pl0dash.renderers.xml import XmlRenderer

__all__ = ["TreeRenderer", "XmlRenderer"]
