"""
Output models for API responses using Pydantic.

This module defines the success and error bodies returned by the two
storefront endpoints.
"""

from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class SendEmailOutput(BaseModel):
    """Response model for an accepted upload notification."""

    data: Annotated[Dict[str, Any], Field(
        description='Response data returned by the email delivery service',
        examples=[{'id': '49a3999c-0ce1-4ea6-ab68-afcd6dc2e794'}]
    )]


class OrderLookupOutput(BaseModel):
    """Response model for an order status lookup."""

    order: Annotated[Optional[Dict[str, str]], Field(
        default=None,
        description='Matching order keyed by slugified sheet headers, null when not found'
    )] = None

    other_orders: Annotated[List[Dict[str, str]], Field(
        default_factory=list,
        description='Other orders placed with the same email, excluding the matched one'
    )]


class ErrorOutput(BaseModel):
    """Error response model."""

    error: Annotated[Union[str, Dict[str, Any]], Field(
        description='Error message, or the upstream error payload for delivery failures',
        examples=['orderNumber is required']
    )]
