"""Request outcome classification over an httpx transport."""

__version__ = "0.1.0"
