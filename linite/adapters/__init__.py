"""
Adapters — external collaborators the engine talks to.
"""
