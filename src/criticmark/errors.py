"""Exception classes for criticmark.

A pattern that fails to match is never an error: the scanner reports
"no match" and the text stays literal. These exceptions cover the
configuration and registration surface only.
"""

from __future__ import annotations


class CriticMarkError(Exception):
    """Base exception for all criticmark errors.
    
    Subclass this for specific error categories.
    """

    pass


class ConfigError(CriticMarkError):
    """Invalid markup configuration.
    
    Raised when a MarkupConfig is built with values the renderer
    cannot safely emit (e.g. a namespace that is not a valid CSS class prefix).
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.
        
        Args:
            field: Name of the offending configuration field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid {field}: {message}")


class PluginError(CriticMarkError):
    """Error in plugin registration.
    
    Raised when a plugin cannot hook into the host Markdown engine.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.
        
        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
