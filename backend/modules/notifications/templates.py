"""
Email rendering for pole inquiries.
"""

from html import escape

from .models import InquiryEmail, PoleDetails


_STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white; padding: 20px; border-radius: 10px 10px 0 0; }
    .content { background: #f9f9f9; padding: 20px; border-radius: 0 0 10px 10px; }
    .pole-details { background: white; padding: 15px; border-radius: 8px; margin: 15px 0; }
    .message-box { background: #e8f4f8; padding: 15px; border-left: 4px solid #4299e1; margin: 20px 0; }
    .footer { margin-top: 20px; padding-top: 20px; border-top: 1px solid #ddd; font-size: 12px; color: #666; }
    .button { display: inline-block; padding: 12px 24px; background: #4299e1; color: white; text-decoration: none; border-radius: 5px; margin: 10px 0; }
"""


def inquiry_subject(details: PoleDetails) -> str:
    return f"Forespørsel om stav: {details.brand} {details.length}cm"


def render_inquiry_email(inquiry: InquiryEmail) -> str:
    """
    Render the owner-facing HTML email for an inquiry.

    All user-supplied and profile text is HTML-escaped.
    """
    details = inquiry.pole_details
    inquirer_email = escape(inquiry.inquirer_email)

    location = ""
    if details.location:
        location = f"<p><strong>Lokasjon:</strong> {escape(details.location)}</p>"

    message_box = ""
    if inquiry.message:
        sender = escape(inquiry.inquirer_name or inquiry.inquirer_email)
        message_box = (
            '<div class="message-box">'
            f"<h3>Melding fra {sender}:</h3>"
            f"<p>{escape(inquiry.message)}</p>"
            "</div>"
        )

    return f"""<!DOCTYPE html>
<html>
  <head>
    <style>{_STYLE}</style>
  </head>
  <body>
    <div class="container">
      <div class="header">
        <h1>Ny forespørsel om stav</h1>
      </div>
      <div class="content">
        <p>Hei {escape(inquiry.owner_name or "der")},</p>
        <p>Du har mottatt en forespørsel om følgende stav:</p>
        <div class="pole-details">
          <h3>Stavdetaljer:</h3>
          <p><strong>Merke:</strong> {escape(details.brand)}</p>
          <p><strong>Lengde:</strong> {escape(str(details.length))}cm</p>
          <p><strong>Vekt:</strong> {escape(str(details.weight))}lbs</p>
          {location}
        </div>
        {message_box}
        <p><strong>Kontaktinformasjon:</strong></p>
        <p>Navn: {escape(inquiry.inquirer_name or "Ikke oppgitt")}<br>
        E-post: {inquirer_email}</p>
        <p>Du kan svare direkte på denne e-posten eller bruke kontaktinformasjonen ovenfor.</p>
        <a href="mailto:{inquirer_email}" class="button">Svar på forespørselen</a>
        <div class="footer">
          <p>Denne e-posten ble sendt via PV Market - Norges plattform for deling og salg av stavhopperstaver.</p>
        </div>
      </div>
    </div>
  </body>
</html>
"""
