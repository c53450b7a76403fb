"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_engine import DiffEngine
from .pattern_explainer import explain_pattern
from .markdown_preview import render_markdown
from .regex_tester import run_pattern
from .text_tools import TextToolError

__all__ = [
    "ConfigManager",
    "DiffEngine",
    "explain_pattern",
    "render_markdown",
    "run_pattern",
    "TextToolError",
]
