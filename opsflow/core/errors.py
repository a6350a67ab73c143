"""Error taxonomy shared by repositories and the route layer.

Repositories raise these; handlers registered in ``opsflow.main`` turn them
into ``{"error": message}`` responses with the matching status code.
"""

from __future__ import annotations


class OpsFlowError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(OpsFlowError):
    status_code = 400


class NotFoundError(OpsFlowError):
    status_code = 404


class ReferenceNotFoundError(NotFoundError):
    """An entity referenced from the request body (not the URL) is missing."""

    status_code = 400


class ConflictError(OpsFlowError):
    status_code = 409


class PersistenceError(OpsFlowError):
    status_code = 500
