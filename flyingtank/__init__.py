"""A small top-down arcade game with a flying tank and a car."""

__version__ = "0.1.0"