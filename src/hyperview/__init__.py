"""
HyperView: an interactive viewer for rotating 4D polytopes.

Layers, from the bottom up: `model` (vectors, matrices, shapes, objects,
scene), `rendering` (camera and draw calls), `engine` (rotation state and
commands) and `app` (the PySide6 front-end).
"""
__version__ = "0.1.0"
