from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, EmailStr, Field, field_validator

from .core import get_settings

settings = get_settings()

T = TypeVar("T")


class RegisterUserRequest(BaseModel):
    """Payload for creating a new user."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)
    name: str = Field(min_length=1, max_length=100)


class LoginUserRequest(BaseModel):
    """Credentials submitted on login."""

    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=100)


class UpdateUserRequest(BaseModel):
    """Profile changes for the current user (all fields optional)."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    password: Optional[str] = Field(default=None, min_length=1, max_length=100)


class UserResponse(BaseModel):
    """Response schema for user data. ``token`` is only set on login."""

    username: str
    name: str
    token: Optional[str] = None

    class Config:
        from_attributes = True


class ContactBase(BaseModel):
    """Shared fields for contact schemas."""

    first_name: str = Field(min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, min_length=1, max_length=20)

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, value):
        if value is not None and len(value) > 100:
            raise ValueError("email should have at most 100 characters")
        return value


class CreateContactRequest(ContactBase):
    """Schema for creating new contact."""

    pass


class UpdateContactRequest(ContactBase):
    """Schema for replacing contact fields; unset fields are left untouched."""

    pass


class SearchContactRequest(BaseModel):
    """Filters and pagination for contact search."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    page: int = Field(default=1, ge=1)
    size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)


class ContactResponse(BaseModel):
    """Schema for returning contact with ID."""

    id: int
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class AddressBase(BaseModel):
    """Shared fields for address schemas."""

    street: Optional[str] = Field(default=None, min_length=1, max_length=255)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    province: Optional[str] = Field(default=None, min_length=1, max_length=100)
    country: str = Field(min_length=1, max_length=100)
    postal_code: str = Field(min_length=1, max_length=10)


class CreateAddressRequest(AddressBase):
    pass


class UpdateAddressRequest(AddressBase):
    pass


class AddressResponse(BaseModel):
    id: int
    street: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: str
    postal_code: str

    class Config:
        from_attributes = True


class Paging(BaseModel):
    """Pagination metadata of a search result."""

    current_page: int
    total_page: int
    size: int


class WebResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"data": ...}``."""

    data: T


class PageResponse(BaseModel, Generic[T]):
    """Page envelope: result rows plus paging metadata."""

    data: List[T]
    paging: Paging
