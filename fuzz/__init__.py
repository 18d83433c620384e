"""Atheris fuzz targets for combiparse.

Requires Atheris (``pip install -e .[fuzz]``).

Targets:
    cursor.py - Cursor navigation and line/column invariants
    stability.py - JSON grammar crash detection and agreement with json.loads
"""
