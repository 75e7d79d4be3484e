from typing import Annotated

from fastapi import Depends, HTTPException, Request

from tourism_catalog.services.booking_api import BookingApiService
from tourism_catalog.services.catalog_api import CatalogApiService
from tourism_catalog.sessions import BrowseSession, SessionStore


def get_catalog_service(request: Request) -> CatalogApiService:
    return request.app.state.catalog_service


def get_booking_service(request: Request) -> BookingApiService:
    return request.app.state.booking_service


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


CatalogDep = Annotated[CatalogApiService, Depends(get_catalog_service)]
BookingDep = Annotated[BookingApiService, Depends(get_booking_service)]
SessionStoreDep = Annotated[SessionStore, Depends(get_session_store)]


def get_session(session_id: str, store: SessionStoreDep) -> BrowseSession:
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


SessionDep = Annotated[BrowseSession, Depends(get_session)]
