"""Helpers for .cub map tooling; the cub3d.libft sub-package holds them."""

__version__ = "0.1.0"