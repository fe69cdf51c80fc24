#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2fxml/utils/__init__.py
"""Utility helpers for md2fxml."""
