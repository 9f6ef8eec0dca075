# TRANSBOOK/backend/transbook/errors.py

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse


class TransbookError(Exception):
    """Erreur métier traduite en réponse HTTP par les handlers ci-dessous"""
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, detail):
        super().__init__(detail)
        self.detail = detail


class ValidationError(TransbookError):
    """Champ manquant, mal formé ou référence introuvable"""
    status_code = 422


class NotFoundError(TransbookError):
    """Enregistrement absent ou appartenant à un autre compte"""
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(TransbookError):
    """Contrainte d'unicité ou de clé étrangère violée"""
    status_code = status.HTTP_409_CONFLICT


class PersistenceError(TransbookError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI):
    @app.exception_handler(TransbookError)
    async def handle_transbook_error(request: Request, exc: TransbookError):
        if isinstance(exc, PersistenceError):
            # Le détail technique reste dans les logs
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": "Erreur interne, veuillez réessayer plus tard"}
            )
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})
