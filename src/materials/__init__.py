"""Surface materials for the Whitted-style shading model."""
