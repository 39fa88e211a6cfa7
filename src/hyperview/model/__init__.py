"""
The MODEL layer contains pure data structures and geometry logic.
It has NO knowledge of the GUI (Qt) or of any drawing surface.
It deals with 4D vectors, homogeneous matrices and shape topology.
"""
