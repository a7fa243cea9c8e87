from datetime import datetime
import re
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError


EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
MIN_NAME_LENGTH = 2
MIN_PHONE_LENGTH = 10


def validate_customer_name(name: str) -> str:
    name = (name or '').strip()
    if len(name) < MIN_NAME_LENGTH:
        raise DomainError('Name must be at least 2 characters')
    return name


def validate_customer_email(email: str) -> str:
    email = (email or '').strip()
    if not EMAIL_PATTERN.match(email):
        raise DomainError('Invalid email address')
    return email


def validate_customer_phone(phone: str) -> str:
    phone = (phone or '').strip()
    if len(phone) < MIN_PHONE_LENGTH:
        raise DomainError('Phone number must be at least 10 characters')
    return phone


@attrs.define
class Customer:
    """Identified by email; created on first booking, never deleted."""

    name: str
    email: str
    phone: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, name: str, email: str, phone: str) -> 'Customer':
        return cls(
            name=validate_customer_name(name),
            email=validate_customer_email(email),
            phone=validate_customer_phone(phone),
        )

    def with_contact(
        self,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> 'Customer':
        return attrs.evolve(
            self,
            name=validate_customer_name(name) if name is not None else self.name,
            email=validate_customer_email(email) if email is not None else self.email,
            phone=validate_customer_phone(phone) if phone is not None else self.phone,
        )
