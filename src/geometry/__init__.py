"""
Visible objects, lights and the scene that holds them.
"""
