"""palette-check: mark picture pixels whose colour is not in a palette image."""

__version__ = '0.1.0'
