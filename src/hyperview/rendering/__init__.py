"""
The RENDERING layer maps 4D objects to 2D draw calls.
It depends on the model but never on a concrete toolkit: it only calls
into an object implementing the `DrawingSurface` protocol.
"""
