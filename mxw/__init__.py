"""Query and configure Glorious mice through Linux hidraw feature reports."""

__version__ = "0.1.2"