from datetime import datetime

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field

from signup_backend.auth.dependencies import (
    Identity,
    get_credential_service,
    get_current_user,
    get_user_store,
)
from signup_backend.auth.service import CredentialService
from signup_backend.errors import NotFoundError
from signup_backend.store.users import UserStore

router = APIRouter(tags=['auth'])

# Matches the String(100) name and email columns.
MAX_FIELD_LENGTH = 100


class SignupRequest(BaseModel):
    name: str | None = Field(
        default=None,
        max_length=MAX_FIELD_LENGTH,
        validation_alias=AliasChoices('name', 'full_name', 'username'),
    )
    email: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    password: str | None = None


class SignupResponse(BaseModel):
    message: str
    id: int


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class PublicUser(BaseModel):
    id: int
    name: str
    email: str


class LoginResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


class UserProfile(PublicUser):
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class ProfileResponse(BaseModel):
    user: UserProfile


@router.post('/signup', response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, service: CredentialService = Depends(get_credential_service)):
    user_id = service.signup(data.name, data.email, data.password)
    return {'message': 'User created', 'id': user_id}


@router.post('/login', response_model=LoginResponse)
@router.post('/signin', response_model=LoginResponse, include_in_schema=False)
def login(data: LoginRequest, service: CredentialService = Depends(get_credential_service)):
    result = service.login(data.email, data.password)
    return {'message': 'Login successful', 'token': result.token, 'user': result.user}


@router.get('/profile', response_model=ProfileResponse)
def profile(
    current_user: Identity = Depends(get_current_user),
    store: UserStore = Depends(get_user_store),
):
    user = store.find_by_id(current_user.id)
    if user is None:
        raise NotFoundError('User not found')
    return {'user': UserProfile.model_validate(user)}
