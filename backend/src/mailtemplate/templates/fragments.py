"""HTML fragments and plain-text formats for block rendering.

Fragments are str.format templates wrapped in markupsafe.Markup at render
time, so every substituted value is HTML-escaped unless it is Markup itself.
HTML templates use inline CSS for email client compatibility.
"""

# =============================================================================
# DOCUMENT
# =============================================================================

DOCUMENT_HEAD_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="email-id" content="{email_id}">
    <title>{subject}</title>
</head>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333; margin: 0; padding: 0; background-color: #f8f9fa;">
<div data-email-id="{email_id}" style="max-width: 600px; margin: 0 auto; padding: 20px; background-color: #ffffff;">
"""

DOCUMENT_TAIL_HTML = """</div>
</body>
</html>
"""

# =============================================================================
# HEADER
# =============================================================================

HEADER_LOGO_HTML = """    <div style="background-color: {color}; padding: 20px; border-radius: 8px; margin-bottom: 20px; text-align: center;">
        <img src="{logo_url}" alt="{name}" style="max-height: 50px; border: 0;">
    </div>
"""

HEADER_NAME_HTML = """    <div style="background-color: {color}; padding: 20px; border-radius: 8px; margin-bottom: 20px; text-align: center;">
        <h2 style="margin: 0; color: {text_color};">{name}</h2>
    </div>
"""

# =============================================================================
# BODY
# =============================================================================

HEADING_HTML = """    <h1 style="margin: 0 0 20px 0; font-size: 24px; color: #1a1a1a; text-align: center;">{title}</h1>
"""

BODY_TEXT_HTML = """    <p style="margin: 0 0 20px 0;">{text}</p>
"""

LIST_ITEM_HTML = """    <table style="border-collapse: collapse; width: 100%; margin-bottom: 10px;">
        <tr>
            <td style="width: 40px; vertical-align: top; padding: 4px;">{icon}</td>
            <td style="vertical-align: top; padding: 4px;">
                <p style="margin: 0;">{text}</p>{metadata}
            </td>
        </tr>
    </table>
"""

LIST_ITEM_ICON_HTML = """<img src="{icon}" alt="" style="width: 32px; height: 32px; border: 0;">"""

LIST_ITEM_METADATA_HTML = """
                <p style="margin: 0; font-size: 12px; color: #666;">{metadata}</p>"""

BUTTON_GROUP_HTML = """    <table style="border-collapse: collapse; width: 100%; margin-bottom: 20px;">
        <tr>
            <td style="padding: 8px; text-align: center; width: 50%;">
                <a href="{left_url}" style="display: inline-block; padding: 12px 24px; background-color: {color}; color: {text_color}; text-decoration: none; border-radius: 5px; font-weight: bold;">{left_text}</a>
            </td>
            <td style="padding: 8px; text-align: center; width: 50%;">
                <a href="{right_url}" style="display: inline-block; padding: 12px 24px; border: 1px solid {color}; color: {color}; text-decoration: none; border-radius: 5px; font-weight: bold;">{right_text}</a>
            </td>
        </tr>
    </table>
"""

BUTTON_HTML = """    <div style="text-align: center; margin-bottom: 20px;">
        <a href="{url}" style="display: inline-block; padding: 12px 24px; background-color: {color}; color: {text_color}; text-decoration: none; border-radius: 5px; font-weight: bold;">{text}</a>
    </div>
"""

# =============================================================================
# FOOTER
# =============================================================================

FOOTER_HTML = """    <hr style="border: none; border-top: 1px solid #dee2e6; margin: 30px 0;">
    <p style="font-size: 12px; color: #666; margin: 0; text-align: center;">{text}</p>
"""

FOOTER_LOGO_HTML = """    <hr style="border: none; border-top: 1px solid #dee2e6; margin: 30px 0;">
    <div style="text-align: center; margin-bottom: 10px;">
        <img src="{logo_url}" alt="{name}" style="max-height: 30px; border: 0;">
    </div>
    <p style="font-size: 12px; color: #666; margin: 0; text-align: center;">{text}</p>
"""

# =============================================================================
# PLAIN TEXT
# =============================================================================

HEADING_TEXT = "{title}\n\n"

BODY_TEXT = "{text}\n\n"

LIST_ITEM_TEXT = "  * {text}\n"

LIST_ITEM_METADATA_TEXT = "    {metadata}\n"

BUTTON_TEXT = "{text}: {url}\n"

FOOTER_TEXT = "--\n{text}\n"
