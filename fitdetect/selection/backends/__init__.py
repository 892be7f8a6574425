"""
Model-selection backends.

Available backends:
    cpu_closed_form: closed-form / heuristic estimators (reference)
"""

from fitdetect.selection.backends.cpu import CPUSelectionBackend

__all__ = ["CPUSelectionBackend"]
