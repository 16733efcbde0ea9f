from __future__ import annotations

from fastapi import APIRouter, Body, HTTPException, Request, Response

from userservice.domain.errors import (
    EmailAlreadyExistsError,
    StorageError,
    UserNotFoundError,
    UserServiceError,
    ValidationError,
)
from userservice.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (UserNotFoundError, 404),
    (EmailAlreadyExistsError, 409),
    (StorageError, 503),
)


def _get_user_service(request: Request) -> UserService:
    svc = getattr(getattr(request.app, "state", None), "user_service", None)
    if not svc:
        raise RuntimeError("UserService not configured")
    return svc


def _http_error(exc: UserServiceError) -> HTTPException:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return HTTPException(status, exc.message)
    return HTTPException(500, exc.message)


def _fields(payload: dict) -> tuple[str | None, str | None, int | None]:
    name, email, age = payload.get("name"), payload.get("email"), payload.get("age")
    if name is not None and not isinstance(name, str):
        raise ValidationError("Name must be text")
    if email is not None and not isinstance(email, str):
        raise ValidationError("Email must be text")
    if age is not None and (isinstance(age, bool) or not isinstance(age, int)):
        raise ValidationError("Age must be a whole number")
    return name, email, age


@router.post("", status_code=201)
def create_user(request: Request, payload: dict = Body(...)):
    svc = _get_user_service(request)
    try:
        name, email, age = _fields(payload)
        user = svc.create_user(name, email, age)
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return user.to_dict()


@router.get("")
def list_users(request: Request):
    svc = _get_user_service(request)
    try:
        users = svc.get_all_users()
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return [user.to_dict() for user in users]


@router.get("/by-email")
def get_user_by_email(request: Request, email: str = ""):
    svc = _get_user_service(request)
    try:
        user = svc.get_user_by_email(email)
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return user.to_dict()


@router.get("/{user_id}")
def get_user(user_id: int, request: Request):
    svc = _get_user_service(request)
    try:
        user = svc.get_user_by_id(user_id)
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return user.to_dict()


@router.put("/{user_id}")
def update_user(user_id: int, request: Request, payload: dict = Body(...)):
    svc = _get_user_service(request)
    try:
        name, email, age = _fields(payload)
        user = svc.update_user(user_id, name, email, age)
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return user.to_dict()


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, request: Request):
    svc = _get_user_service(request)
    try:
        svc.delete_user(user_id)
    except UserServiceError as exc:
        raise _http_error(exc) from exc
    return Response(status_code=204)
