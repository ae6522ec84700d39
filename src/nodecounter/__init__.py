"""Monthly node, farm and capacity history of the ThreeFold Grid."""

__version__ = "0.1.0"
