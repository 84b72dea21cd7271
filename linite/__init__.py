"""
Linite — bulk package install/uninstall command generator.
"""

__version__ = "0.1.0"
