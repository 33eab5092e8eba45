"""Command line interface for poissimple."""
