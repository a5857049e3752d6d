# ============================================================================
# src/blood_analyzer/processors/__init__.py
# ============================================================================
"""
Output processors: results table and narrative.
"""

from .results_table import MarkerRow, build_result_rows, render_results, NO_MARKERS_MESSAGE

__all__ = [
    'MarkerRow',
    'build_result_rows',
    'render_results',
    'NO_MARKERS_MESSAGE',
]
