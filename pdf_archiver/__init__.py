"""
PDF Archiver
============

Files scanned documents into a dated, tagged archive.

Features:
- Filename convention ``YYYY-MM-DD--description__tag1_tag2.pdf``
- Parsing of existing filenames with best-effort fallbacks
- Shared tag list with usage counts
- Guarded moves into per-year archive folders

All processing occurs locally.
"""

__version__ = "0.1.0"
