"""
Outbound notification email model.

Field names follow the Resend send-email parameters so a message can be
dumped straight into the SDK call.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class EmailAttachment(BaseModel):
    """A single email attachment."""

    filename: Annotated[str, Field(
        default='attachment',
        description='Attachment filename shown to the recipient'
    )] = 'attachment'

    content: Annotated[bytes, Field(
        description='Attachment bytes'
    )]


class EmailMessage(BaseModel):
    """Notification email handed to the delivery service."""

    model_config = ConfigDict(populate_by_name=True)

    sender: Annotated[str, Field(
        alias='from',
        description='Validated sender address'
    )]

    to: Annotated[str, Field(
        description='Shop owner address'
    )]

    subject: Annotated[str, Field(
        description='Email subject'
    )]

    html: Annotated[str, Field(
        description='Rendered HTML body'
    )]

    reply_to: Annotated[Optional[str], Field(
        default=None,
        description='Customer address, set only when it is a valid email'
    )] = None

    attachments: Annotated[List[EmailAttachment], Field(
        default_factory=list,
        description='At most one attachment, the uploaded payment slip'
    )]

    def to_resend_params(self) -> Dict[str, Any]:
        """Convert to the parameter dict accepted by ``resend.Emails.send``."""
        params: Dict[str, Any] = {
            'from': self.sender,
            'to': self.to,
            'subject': self.subject,
            'html': self.html,
        }
        if self.reply_to:
            params['reply_to'] = self.reply_to
        if self.attachments:
            params['attachments'] = [
                {'filename': attachment.filename, 'content': list(attachment.content)}
                for attachment in self.attachments
            ]
        return params


class NotificationSettings(BaseModel):
    """Deployment settings of the upload-notification flow."""

    api_key: Annotated[str, Field(
        default='',
        description='Resend API key'
    )] = ''

    sender: Annotated[str, Field(
        default='',
        description='Configured sender address, validated per request'
    )] = ''

    shop_owner_email: Annotated[str, Field(
        default='',
        description='Destination address for notifications'
    )] = ''

    shop_name: Annotated[str, Field(
        default='Coco Original',
        description='Shop name rendered in the email'
    )] = 'Coco Original'
