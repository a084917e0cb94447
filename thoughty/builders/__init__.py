"""
Builders package for Thoughty.

- txtbuilder: Render entry records as journal text
"""

from .txtbuilder import LINE_ENDING, generate_text_file

__all__ = ["LINE_ENDING", "generate_text_file"]
