"""Wayfinder - college and court voice assistant backend."""

__version__ = "0.1.0"
