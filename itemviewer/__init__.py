"""
itemviewer - Item export viewer and item_basic SQL exporter

A Python-based tool to load game-data item XML exports, browse and search
the decoded items, and export them as item_basic SQL rows.
"""

__version__ = "0.3.0"
__author__ = "jbruns"
