"""FastAPI dependencies."""

from fastapi import HTTPException, Request

from dictlookup.services.dictionary import DictionaryService


def get_dictionary_service(request: Request) -> DictionaryService:
    """Return the service created by the application lifespan."""
    service = getattr(request.app.state, "dictionary_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Dictionary service not initialized")
    return service
