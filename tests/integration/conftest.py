import numpy as np
import pytest
from PIL import Image, ImageDraw, ImageFont

from docvalidator.config.settings import Settings
from docvalidator.sensors.image import DecodedImage, decode_image


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(sensor_engine="opencv", sensor_timeout_seconds=60.0)


@pytest.fixture()
def card_photo() -> DecodedImage:
    """A light ID-card shape on a dark table, large enough for the outline detector."""
    array = np.full((600, 900), 30, dtype=np.uint8)
    array[120:480, 150:750] = 240
    return decode_image(array)


@pytest.fixture()
def printed_license() -> DecodedImage:
    """A white card with large printed license text on a dark background."""
    image = Image.new("RGB", (1400, 900), color=(25, 25, 25))
    draw = ImageDraw.Draw(image)
    draw.rectangle((100, 100, 1300, 800), fill=(255, 255, 255))
    font = ImageFont.load_default(size=56)
    for row, text in enumerate(
        ["STATE OF FLORIDA", "DRIVER LICENSE", "DOB 01/02/1990", "DL A1234567"]
    ):
        draw.text((160, 170 + row * 140), text, fill=(0, 0, 0), font=font)
    return decode_image(image)
