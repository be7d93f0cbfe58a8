"""
QR code generation service
"""

import base64
import io
import qrcode

from app.core.config import Settings, settings as default_settings
from app.utils.errors import EncodingError

class QRService:
    """Service for building guest URLs and QR check-in tokens"""

    def __init__(self, settings: Settings = default_settings):
        self.settings = settings

    def get_checkin_url(self, unique_id: str) -> str:
        """Get the URL scanned at the venue entrance"""
        return f"{self.settings.CHECKIN_BASE_URL.rstrip('/')}/scan/{unique_id}"

    def get_invitation_url(self, unique_id: str) -> str:
        """Get the URL sent to the guest"""
        return f"{self.settings.INVITATION_BASE_URL.rstrip('/')}/invitation/{unique_id}"

    def generate_png(self, data: str, format: str = 'PNG') -> bytes:
        """Render data as a QR code image"""
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self.settings.QR_BOX_SIZE,
            border=self.settings.QR_BORDER,
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")

        buffer = io.BytesIO()
        img.save(buffer, format=format)

        return buffer.getvalue()

    def generate_data_uri(self, data: str) -> str:
        """Render data as a QR code embedded in a base64 PNG data URI"""
        try:
            png_bytes = self.generate_png(data)
        except Exception as e:
            raise EncodingError() from e

        encoded = base64.b64encode(png_bytes).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def generate_checkin_qr(self, unique_id: str) -> str:
        """Generate the check-in token for a guest.

        Only the identifier is encoded, so the token stays valid when the
        guest is renamed.
        """
        return self.generate_data_uri(self.get_checkin_url(unique_id))
