"""FastAPI endpoints for registration and cookie sessions."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from protean.utils.globals import current_domain

from storefront.api.dependencies import current_user
from storefront.api.schemas import LoginRequest, MessageResponse, RegisterRequest, UserResponse
from storefront.config import get_settings
from storefront.identity.credentials import issue_token
from storefront.identity.registration import LogIn, RegisterUser

session_router = APIRouter(prefix="/api/sessions", tags=["sessions"])


def set_session_cookie(response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.jwt_expires_minutes * 60,
        httponly=True,
        samesite="lax",
    )


@session_router.post("/register", status_code=201, response_model=UserResponse)
async def register(body: RegisterRequest) -> UserResponse:
    command = RegisterUser(
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
        age=body.age,
    )
    user = current_domain.process(command, asynchronous=False)
    return UserResponse(**user)


@session_router.post("/login")
async def login(body: LoginRequest):
    user = current_domain.process(LogIn(email=body.email, password=body.password), asynchronous=False)
    token = issue_token(user)
    response = JSONResponse(content={"status": "success", "user": user})
    set_session_cookie(response, token)
    return response


@session_router.get("/current", response_model=UserResponse)
async def current(user: dict = Depends(current_user)) -> UserResponse:
    return UserResponse(**{field: user.get(field) for field in UserResponse.model_fields})


@session_router.post("/logout", response_model=MessageResponse)
async def logout():
    response = JSONResponse(content={"message": "Logged out"})
    response.delete_cookie(get_settings().auth_cookie_name)
    return response
