"""Search trees, expression trees, graphs and optimal BST costs, with menu programs."""

__version__ = "1.0.0"