"""
Application-wide exception classes
"""
from typing import Optional, Any

class AppException(Exception):
    """Base application exception"""
    def __init__(self, message: str = "An application error occurred", status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class InvalidArgumentError(AppException):
    """A caller-supplied parameter violates a documented constraint"""
    def __init__(self, argument: str, message: Optional[str] = None, status_code: int = 400):
        if message is None:
            message = f"Invalid value for argument '{argument}'."
        super().__init__(message, status_code)
        self.argument = argument

class GameAlreadyExistsError(AppException):
    """Another game already uses the same (name, producer) fingerprint"""
    def __init__(self, name: str, producer: str, status_code: int = 422):
        message = f"Game '{name}' by producer '{producer}' already exists."
        super().__init__(message, status_code)
        self.name = name
        self.producer = producer

class GameNotFoundError(AppException):
    """Raised when a mutating operation references a game that does not exist"""
    def __init__(self, game_id: Any = None, status_code: int = 404):
        message = f"Game with ID {game_id} not found" if game_id else "Game not found"
        super().__init__(message, status_code)
        self.game_id = game_id

class StorageError(AppException):
    """The repository could not complete the requested operation"""
    def __init__(self, message: str = "A storage error occurred", status_code: int = 500):
        super().__init__(message, status_code)
