"""Strategy-polymorphic route search on weighted terrain grids."""

__version__ = "0.1.0"
