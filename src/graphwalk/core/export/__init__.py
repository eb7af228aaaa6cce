"""Graph export."""

from .dot import Attribute, VertexState, pp, pp_seq, with_out

__all__ = ["Attribute", "VertexState", "pp", "pp_seq", "with_out"]
