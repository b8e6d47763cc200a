"""
Selection Package - Identity-Keyed Row Selection.

Components:
    - SelectionTracker: toggle, page-scoped select-all, clear, reset on
      dataset replacement, change notification with full records
"""

from table_engine.selection.selection_tracker import SelectionTracker

__all__ = ["SelectionTracker"]
