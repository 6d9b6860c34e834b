# realizer/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Entity Not Found Errors ---

class LanguageNotFoundError(DomainError):
    """Raised when no language strategy is registered for a language code."""
    def __init__(self, lang_code: str):
        super().__init__(f"Language '{lang_code}' is not supported or not found in the registry.")

# --- Validation Errors ---

class FeatureValueError(DomainError):
    """Raised when a feature is set to a value of the wrong type, or on a frozen store."""

class InvalidElementError(DomainError):
    """Raised when a tree node is built from something that is not an element."""
    def __init__(self, reason: str):
        super().__init__(f"Invalid element: {reason}")

# --- Process Errors ---

class RealisationError(DomainError):
    """Raised by the use case when realisation fails for an unexpected reason."""
    def __init__(self, lang_code: str, details: str):
        super().__init__(f"Realisation failed for '{lang_code}': {details}")
