from io import BytesIO
import logging

from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import A4, landscape

# A4 landscape: 842 x 595 points, origin at bottom-left
PAGE_SIZE = landscape(A4)
FONT_NAME = "Times-Roman"
TITLE = "Certificate of Completion"


def certificate_lines(cert):
    """(text, x, y, font size) for every line drawn on the certificate.

    Positions are fixed; long values are not wrapped and may run past the
    right edge of the page.
    """
    return [
        (TITLE, 60, 470, 28),
        (f"This certifies that {cert.name or ''}", 60, 420, 18),
        (f"Project: {cert.project or ''}", 60, 390, 14),
        (f"Duration: {cert.start_date or ''} - {cert.end_date or ''}", 60, 360, 12),
        (f"Issue Date: {cert.issue_date or ''}", 60, 330, 12),
        (cert.signature_label, 60, 240, 12),
    ]


def render_certificate_pdf(cert) -> bytes:
    """Render a single-page PDF for the certificate and return its bytes."""
    packet = BytesIO()
    can = canvas.Canvas(packet, pagesize=PAGE_SIZE)
    can.setTitle(f"Certificate {cert.cert_id}")
    can.setAuthor(cert.signature_label)
    can.setFillColorRGB(0, 0, 0)

    for text, x, y, size in certificate_lines(cert):
        can.setFont(FONT_NAME, size)
        can.drawString(x, y, text)

    can.showPage()
    can.save()
    data = packet.getvalue()
    logging.info(f"[PDF] Rendered certificate {cert.cert_id} ({len(data)} bytes)")
    return data
