import secrets
import string
from pydantic import BaseModel
from typing import Optional, List, Iterable

from .models import Product, User

TOKEN_LENGTH = 16
_TOKEN_ALPHABET = string.ascii_letters + string.digits


class LoginIn(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None


def _make_token(length: int = TOKEN_LENGTH) -> str:
    return "".join(secrets.choice(_TOKEN_ALPHABET) for _ in range(length))


def _products_matching(products: Iterable[Product], query: str) -> List[Product]:
    # literal, case-sensitive substring on description
    return [p for p in products if query in p.description]


def _products_for_brand(products: Iterable[Product], brand_id: str) -> List[Product]:
    return [p for p in products if p.category_id == brand_id]


def _find_user(users: Iterable[User], username: str, password: str) -> Optional[User]:
    for user in users:
        if user.login.username == username and user.login.password == password:
            return user
    return None
