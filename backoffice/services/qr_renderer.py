"""QR code image rendering for Swiss QR-bills."""

import base64
from io import BytesIO

import qrcode
from PIL import Image, ImageDraw


class QRBillRenderer:
    """Render an SPC payload as a QR code with the Swiss cross overlay."""

    # The cross is 7mm on a 46mm QR code
    CROSS_RATIO = 0.152
    CROSS_COLOR = "#FF0000"
    BACKGROUND_COLOR = "#FFFFFF"

    def __init__(self, box_size: int = 10, border: int = 4, cross_ratio: float = CROSS_RATIO):
        """
        Initialize QR-bill renderer.

        Args:
            box_size: Size of each QR code box in pixels
            border: Quiet zone around the code, in boxes
            cross_ratio: Width of the Swiss cross relative to the image width
        """
        if not 0 < cross_ratio < 1:
            raise ValueError("cross_ratio must be between 0 and 1")
        self.box_size = box_size
        self.border = border
        self.cross_ratio = cross_ratio

    def make_image(self, payload: str) -> Image.Image:
        """
        Generate the QR code image with the Swiss cross composited on top.

        Args:
            payload: The SPC text record

        Returns:
            RGB PIL image
        """
        qr = qrcode.QRCode(
            version=None,
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self.box_size,
            border=self.border
        )
        qr.add_data(payload)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
        self.draw_swiss_cross(img)
        return img

    def draw_swiss_cross(self, img: Image.Image) -> None:
        """Draw a white cross on a red square in the center of the image."""
        width, height = img.size
        cross_size = round(width * self.cross_ratio)
        x = (width - cross_size) // 2
        y = (height - cross_size) // 2

        draw = ImageDraw.Draw(img)
        draw.rectangle(
            [x, y, x + cross_size - 1, y + cross_size - 1],
            fill=self.CROSS_COLOR
        )

        # Cross arms on a 5x5 grid
        arm = cross_size / 5
        draw.rectangle(
            [round(x + arm * 2), y, round(x + arm * 3) - 1, y + cross_size - 1],
            fill=self.BACKGROUND_COLOR
        )
        draw.rectangle(
            [x, round(y + arm * 2), x + cross_size - 1, round(y + arm * 3) - 1],
            fill=self.BACKGROUND_COLOR
        )

    def generate_qr_image(self, payload: str) -> bytes:
        """
        Generate QR code image as PNG bytes.

        Args:
            payload: The SPC text record

        Returns:
            PNG image as bytes
        """
        buffer = BytesIO()
        self.make_image(payload).save(buffer, format="PNG")
        return buffer.getvalue()

    def generate_qr_base64(self, payload: str) -> str:
        """
        Generate QR code as base64-encoded PNG string.

        Returns:
            Base64 encoded PNG string (without data: prefix)
        """
        image_bytes = self.generate_qr_image(payload)
        return base64.b64encode(image_bytes).decode('utf-8')

    def generate_data_url(self, payload: str) -> str:
        """Generate QR code as a data:image/png URL for the invoice template."""
        return f"data:image/png;base64,{self.generate_qr_base64(payload)}"
