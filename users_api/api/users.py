# users_api/api/users.py

from typing import List

from fastapi import APIRouter, Depends, Form, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.db.engine import get_engine
from users_api.db.schema import users
from users_api.exceptions import DatabaseOperationError, RequestDecodeError
from users_api.models.users import UserIn, UserOut

router = APIRouter(tags=["users"])


def insert_user(engine: Engine, first_name: str, last_name: str) -> None:
    """
    Insert one row; the statement is committed on its own.
    """
    stmt = users.insert().values(first_name=first_name, last_name=last_name)

    try:
        with engine.begin() as conn:
            conn.execute(stmt)
    except SQLAlchemyError as exc:
        raise DatabaseOperationError(str(exc)) from exc


async def decode_user(request: Request) -> UserIn:
    """
    Read the body as JSON whatever the Content-Type header says.
    """
    body = await request.body()

    try:
        return UserIn.model_validate_json(body)
    except ValidationError as exc:
        raise RequestDecodeError(str(exc)) from exc


@router.post("/users", status_code=status.HTTP_201_CREATED)
def create_user(
    user: UserIn = Depends(decode_user),
    engine: Engine = Depends(get_engine),
) -> Response:
    insert_user(engine, user.first_name, user.last_name)
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/users", response_model=List[UserOut])
def list_users(engine: Engine = Depends(get_engine)) -> List[UserOut]:
    """
    Return every user in storage order.
    """
    stmt = select(users.c.id, users.c.first_name, users.c.last_name)

    try:
        with engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()

        return [
            UserOut(
                id=row["id"],
                first_name=row["first_name"],
                last_name=row["last_name"],
            )
            for row in rows
        ]
    except (SQLAlchemyError, ValidationError) as exc:
        raise DatabaseOperationError(str(exc)) from exc


@router.post("/create")
def create_user_from_form(
    first_name: str = Form(""),
    last_name: str = Form(""),
    engine: Engine = Depends(get_engine),
) -> RedirectResponse:
    """
    Handle the HTML form submission, then send the browser back to the form.
    """
    insert_user(engine, first_name, last_name)
    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
