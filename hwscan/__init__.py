"""Hardware and system information for Linux, gathered from procfs and sysfs."""

__version__ = "0.1.0"