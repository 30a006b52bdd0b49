"""Read and set display backlight brightness through sysfs."""

__version__ = "0.1.0"
