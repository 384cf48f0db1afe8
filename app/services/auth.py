from typing import Tuple

from sqlalchemy import or_

from app.core.exceptions import InvalidCredentialsError
from app.services.entities import Gateways
from app.services.gateway import Row


def authenticate(gateways: Gateways, username_or_email: str, password: str) -> Tuple[str, Row]:
    """
    Return (role, row) for the first account matching the credentials.

    Admins are checked before students, so an admin wins when both tables
    hold the same pair. Passwords are compared as stored (plaintext).
    """
    for role, gateway in (("admin", gateways.admins), ("student", gateways.students)):
        c = gateway.columns
        row = gateway.find_first(
            or_(c.email == username_or_email, c.username == username_or_email),
            c.password == password,
        )
        if row is not None:
            return role, row

    raise InvalidCredentialsError()
