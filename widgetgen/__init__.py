"""widgetgen -- project generator for web widgets."""

__version__ = "0.1.0"
