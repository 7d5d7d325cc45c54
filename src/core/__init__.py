"""Value types shared by every other package: vectors, colors, rays."""
