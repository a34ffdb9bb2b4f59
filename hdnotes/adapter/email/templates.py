"""Email bodies for account notifications."""

from dataclasses import dataclass
from html import escape

_LAYOUT = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"></head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; max-width: 600px; margin: 0 auto; padding: 20px;">
    <div style="background: #367AFF; padding: 24px; border-radius: 10px 10px 0 0; text-align: center;">
        <h1 style="color: white; margin: 0; font-size: 22px;">{title}</h1>
    </div>
    <div style="background: #ffffff; padding: 24px; border: 1px solid #e5e7eb; border-top: none; border-radius: 0 0 10px 10px;">
        {body}
    </div>
</body>
</html>
"""


@dataclass(frozen=True)
class RenderedEmail:
    """Subject plus HTML and plain-text bodies."""

    subject: str
    html: str
    text: str


def render_otp_email(name: str, code: str, expiry_minutes: int) -> RenderedEmail:
    """Render the passcode email."""
    safe_name = escape(name)
    body = (
        f'<p style="font-size: 16px;">Hi <strong>{safe_name}</strong>,</p>'
        '<p style="font-size: 16px;">Use this code to continue:</p>'
        f'<p style="font-size: 32px; font-weight: bold; letter-spacing: 8px; text-align: center;">{code}</p>'
        f'<p style="font-size: 14px; color: #6b7280;">The code expires in {expiry_minutes} minutes. '
        "If you didn't request it, you can ignore this email.</p>"
    )
    text = (
        f"Hi {name},\n\n"
        f"Your HD Notes verification code is: {code}\n\n"
        f"The code expires in {expiry_minutes} minutes.\n"
        "If you didn't request it, you can ignore this email.\n"
    )
    return RenderedEmail(
        subject="Your HD Notes verification code",
        html=_LAYOUT.format(title="Verify your email", body=body),
        text=text,
    )


def render_welcome_email(name: str, frontend_url: str) -> RenderedEmail:
    """Render the welcome email."""
    safe_name = escape(name)
    body = (
        f'<p style="font-size: 16px;">Hi <strong>{safe_name}</strong>,</p>'
        '<p style="font-size: 16px;">Your account is ready. Start writing notes any time:</p>'
        f'<p style="text-align: center;"><a href="{frontend_url}" style="background: #367AFF; color: white; '
        'padding: 12px 28px; text-decoration: none; border-radius: 8px;">Open HD Notes</a></p>'
    )
    text = f"Hi {name},\n\nYour HD Notes account is ready.\n\nOpen it at {frontend_url}\n"
    return RenderedEmail(
        subject="Welcome to HD Notes",
        html=_LAYOUT.format(title="Welcome to HD Notes", body=body),
        text=text,
    )
