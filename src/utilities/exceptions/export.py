"""Errors raised by the offline export scripts."""


class StaticExportError(Exception):
    """Throw an exception when a page cannot be rendered during export."""
