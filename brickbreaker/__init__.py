"""A brick breaker arcade game with power-ups, menus, audio settings and save games."""

__version__ = "0.1.0"