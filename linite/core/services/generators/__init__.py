"""
Generators — produce files from generation results.

Each generator module exposes a ``render_*()`` function that returns
a ``GeneratedFile``.
"""
