"""Player market-value estimation from position-weighted attribute scores."""

__version__ = "0.1.0"
