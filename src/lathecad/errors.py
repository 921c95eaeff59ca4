"""Exception types raised by latheCAD."""


class LatheError(Exception):
    """Base class for latheCAD errors."""


class ConfigError(LatheError, ValueError):
    """A job file or configuration mapping could not be interpreted."""


class ExportError(LatheError, ValueError):
    """Geometry could not be exported, usually because none was set."""


__all__ = ['LatheError', 'ConfigError', 'ExportError']
