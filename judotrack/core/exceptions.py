"""
Excepciones de dominio de JudoTrack.

Los componentes puros (clasificador de actividad, evaluador de logros y selector
de temas) lanzan ValidationError cuando reciben datos fuera de contrato. Los
servicios lanzan el resto; main.py los traduce a respuestas HTTP.
"""


class JudoTrackError(Exception):
    """Base de todas las excepciones de dominio."""
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JudoTrackError, ValueError):
    status_code = 422


class NotFoundError(JudoTrackError):
    status_code = 404


class ConflictError(JudoTrackError):
    status_code = 409


class PermissionDeniedError(JudoTrackError):
    status_code = 403
