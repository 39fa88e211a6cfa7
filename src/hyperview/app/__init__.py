"""
The APP layer is the PySide6 front-end.
It turns key presses into engine commands, drives the frame timer and
paints the engine's draw calls into a QImage.
"""
