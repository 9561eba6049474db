"""Lane Rush - dodge the falling obstacles, one lane at a time."""

__version__ = "0.1.0"
