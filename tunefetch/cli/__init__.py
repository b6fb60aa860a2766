"""Command-line tools for tunefetch.

- ``python -m tunefetch.cli`` -- browse trending music, playlist content and
  search results page by page (see ``browse.py``).
"""
