"""Hotel room booking core: booking storage and pricing, tokens, passwords and spreadsheet reports."""

__version__ = "0.1.0"