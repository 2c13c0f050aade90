"""Device-independent plotting core: coordinate mapping, backends and the plot surface."""
