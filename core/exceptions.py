# core/exceptions.py
"""
Custom exceptions for the advisory core
"""

class AgriGuardError(Exception):
    """Base exception for the AgriGuard advisory core"""
    pass

class AgentError(AgriGuardError):
    """Agent-related errors"""
    pass

class AgentConfigError(AgriGuardError):
    """Agent configuration errors"""
    pass

class ReadingValidationError(AgriGuardError, ValueError):
    """Rejected sensor, weather or crop update"""
    pass

class GatewayError(AgriGuardError):
    """Remote advisory endpoint errors"""
    pass

class RemoteUnavailableError(GatewayError):
    """Remote endpoint could not be reached after all retries"""
    pass
