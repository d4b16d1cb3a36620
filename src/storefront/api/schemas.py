"""Pydantic request/response schemas for the storefront API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# --- Product Request Schemas ---


class ProductCreateRequest(BaseModel):
    model_config = ConfigDict(
        strict=True,
        json_schema_extra={
            "examples": [
                {
                    "title": "Mechanical Keyboard",
                    "description": "Tenkeyless keyboard with brown switches.",
                    "code": "KB-TKL-001",
                    "price": 89.9,
                    "stock": 25,
                    "category": "electronics",
                    "thumbnails": ["https://cdn.example.com/kb.jpg"],
                }
            ]
        },
    )

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1, max_length=50)
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    category: str = Field(..., min_length=1, max_length=100)
    status: bool = True
    thumbnails: list[str] = Field(default_factory=list)
    owner: str | None = Field(None, max_length=255)


class ProductUpdateRequest(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    code: str | None = Field(None, min_length=1, max_length=50)
    price: float | None = Field(None, ge=0)
    stock: int | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    status: bool | None = None
    thumbnails: list[str] | None = None
    owner: str | None = Field(None, max_length=255)


# --- Cart Request Schemas ---


class CartLine(BaseModel):
    product_id: str
    quantity: int = Field(1, ge=1)


class CartQuantityRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class AddToCartRequest(BaseModel):
    quantity: int = Field(1, ge=1)


# --- Session Request Schemas ---


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "first_name": "Ada",
                    "last_name": "Lovelace",
                    "email": "ada@example.com",
                    "age": 36,
                    "password": "analytical-engine",
                }
            ]
        }
    }

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    age: int | None = Field(None, ge=0, le=150)
    password: str = Field(..., min_length=1, max_length=128)


class LoginRequest(BaseModel):
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


# --- Response Schemas ---


class CartIdResponse(BaseModel):
    cart_id: str


class MessagesResponse(BaseModel):
    messages: list[str]


class MessageResponse(BaseModel):
    message: str


class UserResponse(BaseModel):
    id: str | None = None
    first_name: str
    last_name: str
    email: str
    age: int | None = None
    role: str
    cart_id: str | None = None
