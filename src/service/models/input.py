"""
Input models for parsed requests using Pydantic.

These models hold request data after the handler has decoded the body or
query string and checked the required fields, so the logic layer works with
typed values instead of raw event dictionaries.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """A file part read from a multipart upload."""

    name: Annotated[str, Field(
        default='attachment',
        description='Original filename of the upload',
        examples=['payment-slip.jpg']
    )] = 'attachment'

    content: Annotated[bytes, Field(
        description='Raw file bytes'
    )]


class UploadRequest(BaseModel):
    """A customer's payment-slip upload."""

    order_number: Annotated[str, Field(
        min_length=1,
        description='Storefront order number',
        examples=['1001']
    )]

    order_email: Annotated[str, Field(
        min_length=1,
        description='Customer email as submitted, not yet sanitized',
        examples=['customer@example.com']
    )]

    file: Annotated[Optional[UploadedFile], Field(
        default=None,
        description='Attached payment slip, multipart requests only'
    )] = None

    upload_image: Annotated[Optional[str], Field(
        default=None,
        description='URL of an already uploaded image, JSON requests only',
        examples=['https://cdn.example.com/slip.png']
    )] = None


class OrderLookupQuery(BaseModel):
    """Query parameters of an order status lookup."""

    order_number: Annotated[str, Field(
        min_length=1,
        description='Order number to look up (matched against the ID column)'
    )]

    email: Annotated[Optional[str], Field(
        default=None,
        description='Customer email used to list the customer\'s other orders'
    )] = None
