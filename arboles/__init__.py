"""Binary, search, AVL and n-ary trees with classic tree queries."""

__version__ = "0.1.0"