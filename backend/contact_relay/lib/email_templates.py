# contact_relay/lib/email_templates.py
from contact_relay.lib.sanitize import sanitize_html
from contact_relay.lib.validation import Submission

SITE_NAME = "cybersoft.az"

_STYLE = """
      body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
        line-height: 1.6;
        color: #333;
        margin: 0;
        padding: 0;
        background-color: #f5f5f5;
      }
      .container {
        max-width: 600px;
        margin: 0 auto;
        background-color: #ffffff;
      }
      .header {
        background: linear-gradient(135deg, #2563eb 0%, #9333ea 100%);
        color: white;
        padding: 40px 30px;
        text-align: center;
      }
      .header h1 { margin: 0; font-size: 24px; font-weight: 600; }
      .header p { margin: 10px 0 0 0; font-size: 14px; opacity: 0.9; }
      .content { padding: 30px; }
      .field { margin-bottom: 24px; }
      .label {
        font-weight: 600;
        color: #4b5563;
        font-size: 14px;
        display: block;
        margin-bottom: 8px;
        text-transform: uppercase;
        letter-spacing: 0.5px;
      }
      .value {
        color: #1f2937;
        padding: 12px 16px;
        background: #f9fafb;
        border-radius: 8px;
        border: 1px solid #e5e7eb;
        font-size: 15px;
      }
      .value a { color: #2563eb; text-decoration: none; }
      .value a:hover { text-decoration: underline; }
      .message-box {
        background: #ffffff;
        padding: 16px;
        border-left: 4px solid #2563eb;
        border-radius: 8px;
        margin-top: 8px;
        font-size: 15px;
        line-height: 1.6;
      }
      .footer {
        text-align: center;
        padding: 20px 30px;
        background-color: #f9fafb;
        border-top: 1px solid #e5e7eb;
        color: #6b7280;
        font-size: 13px;
      }
      .footer p { margin: 5px 0; }
      @media only screen and (max-width: 600px) {
        .header { padding: 30px 20px; }
        .content { padding: 20px; }
        .footer { padding: 15px 20px; }
      }
"""


def build_subject(sub: Submission) -> str:
    return f"New Contact: {sub.name} - {sub.project_label}"


def _field(label: str, value_html: str, css_class: str = "value") -> str:
    return f"""
        <div class="field">
          <span class="label">{label}</span>
          <div class="{css_class}">{value_html}</div>
        </div>"""


def render_html(sub: Submission) -> str:
    """HTML rendition; every user-supplied value is escaped exactly once."""
    name = sanitize_html(sub.name)
    email = sanitize_html(sub.email)
    label = sanitize_html(sub.project_label)
    message = sanitize_html(sub.message).replace("\n", "<br>")

    fields = [
        _field("👤 Name", name),
        _field("📧 Email", f'<a href="mailto:{email}">{email}</a>'),
    ]
    if sub.company:
        fields.append(_field("🏢 Company", sanitize_html(sub.company)))
    fields.append(_field("📋 Project Type", label))
    fields.append(_field("💬 Message", message, css_class="message-box"))

    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <style>{_STYLE}    </style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1>✉️ New Contact Form Submission</h1>
        <p>From {SITE_NAME}</p>
      </div>

      <div class="content">{"".join(fields)}
      </div>

      <div class="footer">
        <p><strong>This message was sent from the contact form on {SITE_NAME}</strong></p>
        <p>Reply directly to this email to respond to {name}</p>
      </div>
    </div>
  </body>
</html>"""


def render_text(sub: Submission) -> str:
    title = f"New Contact Form Submission from {SITE_NAME}"
    lines = [
        title,
        "=" * len(title),
        "",
        f"Name: {sub.name}",
        f"Email: {sub.email}",
    ]
    if sub.company:
        lines.append(f"Company: {sub.company}")
    lines += [
        f"Project Type: {sub.project_label}",
        "",
        "Message:",
        sub.message,
        "",
        "---",
        f"Reply directly to this email to respond to {sub.name}",
    ]
    return "\n".join(lines).strip()
