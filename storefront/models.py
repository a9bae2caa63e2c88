# storefront/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Union


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    category_id: str = Field(alias="categoryId")
    name: str
    description: str
    price: Union[int, float]
    image_urls: List[str] = Field(default_factory=list, alias="imageUrls")


class Brand(BaseModel):
    id: Optional[str] = None
    name: str


class LoginInfo(BaseModel):
    model_config = ConfigDict(extra="allow")

    username: str
    password: str


class User(BaseModel):
    # profile fields (name, email, picture...) are carried but never read
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    login: LoginInfo


class Token(BaseModel):
    id: Optional[str] = Field(default=None, exclude=True)
    username: str
    token: str
