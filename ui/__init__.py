"""
ui/
---
Presentation layer.

    from ui import Renderer, Scene, narrate
    from ui import TerminalView
"""

from ui.narration import TEMPLATES, format_distance, format_number, narrate
from ui.render import (
    CONFIG,
    NARRATION,
    RenderConfig,
    Renderer,
    Scene,
    ShadowBuffer,
    edge_target,
    label_target,
    node_target,
)
from ui.terminal import TerminalView, trace_table, distance_table

__all__ = [
    "TEMPLATES",
    "format_distance",
    "format_number",
    "narrate",
    "CONFIG",
    "NARRATION",
    "RenderConfig",
    "Renderer",
    "Scene",
    "ShadowBuffer",
    "edge_target",
    "label_target",
    "node_target",
    "TerminalView",
    "trace_table",
    "distance_table",
]
