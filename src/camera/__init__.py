"""Pinhole camera mapping pixels to primary rays."""
