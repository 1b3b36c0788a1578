"""
HTML body of the payment-slip notification email.

All interpolated values come from the customer's request and are escaped
before they are embedded in the markup.
"""

from datetime import datetime, timezone
from html import escape
from typing import Optional


def _render_image_block(upload_image: str) -> str:
    return f"""<div style="margin-top:16px;padding:12px;border:1px solid #e5e7eb;border-radius:8px;background:#fafafa">
  <div style="font-weight:600;margin-bottom:8px">Uploaded Image</div>
  <img src="{escape(upload_image, quote=True)}" alt="Uploaded image" style="max-width:100%;height:auto;border-radius:6px;border:1px solid #e5e7eb"/>
</div>"""


def render_notification_html(
    order_number: str,
    customer_email: str,
    upload_image: Optional[str] = None,
    shop_name: str = 'Coco Original',
    year: Optional[int] = None,
) -> str:
    """
    Render the notification card shown to the shop owner.

    Args:
        order_number: Order number as submitted
        customer_email: Customer email as submitted (may be invalid)
        upload_image: Optional image URL to embed
        shop_name: Shop name for header and copyright line
        year: Copyright year, the current UTC year by default

    Returns:
        Complete HTML document
    """
    if year is None:
        year = datetime.now(timezone.utc).year
    image_html = _render_image_block(upload_image) if upload_image else ''
    shop = escape(shop_name)

    return f"""<!doctype html>
<html>
  <body style="margin:0;padding:0;background:#f6f7f9">
    <div style="max-width:640px;margin:0 auto;padding:24px">
      <div style="background:#ffffff;border:1px solid #e5e7eb;border-radius:12px;overflow:hidden">
        <div style="padding:20px 24px;border-bottom:1px solid #e5e7eb;background:#0f172a;color:#ffffff">
          <div style="font-size:18px;font-weight:700;letter-spacing:0.4px">{shop}</div>
          <div style="font-size:12px;opacity:0.85">Payment Slip Upload</div>
        </div>
        <div style="padding:20px 24px;color:#0f172a">
          <div style="display:flex;gap:24px;flex-wrap:wrap">
            <div style="flex:1;min-width:240px">
              <div style="font-size:12px;color:#6b7280">Order Number</div>
              <div style="font-size:16px;font-weight:600">{escape(order_number)}</div>
            </div>
            <div style="flex:1;min-width:240px">
              <div style="font-size:12px;color:#6b7280">Customer Email</div>
              <div style="font-size:16px;font-weight:600">{escape(customer_email)}</div>
            </div>
          </div>
          {image_html}
        </div>
        <div style="padding:16px 24px;border-top:1px solid #e5e7eb;background:#f9fafb;color:#6b7280;text-align:center;font-size:12px">
          Copyright &copy; {year} {shop}. All rights reserved.
        </div>
      </div>
    </div>
  </body>
</html>"""
