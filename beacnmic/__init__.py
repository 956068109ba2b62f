"""Message encoding, device protocol and hot plug tracking for Beacn audio devices."""

__version__ = "0.1.0"