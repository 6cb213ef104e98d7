"""Parse sphere scene files, ray-cast them and save the result as PPM images."""

__version__ = "0.1.0"