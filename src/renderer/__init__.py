"""Shading strategies, backgrounds and the parallel render loop."""
