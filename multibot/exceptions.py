"""
Custom Exceptions for the Module Framework
==========================================

Defines the exception classes raised while loading modules and settings.
"""


class BotFrameworkException(Exception):
    """Base exception for the module framework."""

    def __init__(self, message: str, original_error: Exception = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self):
        if self.original_error:
            return f"{self.message} (Caused by: {self.original_error})"
        return self.message


class ModuleLoadError(BotFrameworkException):
    """Raised when a module descriptor, command or event file cannot be loaded."""

    def __init__(self, path: str, message: str, original_error: Exception = None):
        self.path = path
        super().__init__(f"[{path}] {message}", original_error)


class SettingsError(BotFrameworkException):
    """Raised when the settings snapshot cannot be created or read."""

    def __init__(self, path: str, message: str = None, original_error: Exception = None):
        self.path = path
        msg = message or f"Could not access settings file: {path}"
        super().__init__(msg, original_error)


class StorageError(BotFrameworkException):
    """Raised when the guild storage backend fails."""

    def __init__(self, backend: str, message: str, original_error: Exception = None):
        self.backend = backend
        super().__init__(f"[{backend}] {message}", original_error)
