"""Console helpers built on Rich."""
