"""
Utility helpers for the CLARANS package.

This sub-package groups together the components around the search engine:

• Point type, distance metrics and random point generation (`points.py`).
• Command-line interface helpers (`cli.py`).
• File I/O (`data_processing.py`, `save_results.py`).
• Logging colour codes and progress bars (`logging.py`).
"""
