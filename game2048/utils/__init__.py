# -*- coding: utf-8 -*-
"""
This module provides the text helpers used to display a game session.
"""

from .summary import format_grid, share_text, status_message

__all__ = ["format_grid", "status_message", "share_text"]
