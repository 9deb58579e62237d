"""Pillow-backed image codec."""

import io
from contextlib import contextmanager
from typing import Any, Iterator

from PIL import Image, features

from .exceptions import ConfigurationError, FormatMetadataReadError
from .profile import CompressionCodec, EncodeProfile
from .protocols import ImageCodecProtocol

# Pillow's AVIF writer only produces 8-bit images
SUPPORTED_BIT_DEPTHS = (8,)


def ensure_avif_support() -> None:
    """Fail unless this Pillow build can read and write AVIF."""
    if not features.check("avif"):
        raise ConfigurationError(
            "Pillow was built without AVIF support; install Pillow>=11.3 wheels"
        )


def register_heif_support() -> None:
    """Let Pillow open HEIC/HEIF sources through pillow-heif."""
    from pillow_heif import register_heif_opener

    register_heif_opener()


class PillowImageCodec:
    """Decode any Pillow-readable image and encode it to AVIF."""

    def decode(self, image_bytes: bytes) -> Image.Image:
        """Fully decode ``image_bytes``; nothing is kept open on failure."""
        image = Image.open(io.BytesIO(image_bytes))
        try:
            image.load()
        except Exception:
            image.close()
            raise
        return image

    def read_format_metadata(self, image: Image.Image) -> str:
        label = image.format
        if not label:
            raise FormatMetadataReadError("decoded image carries no loader label")
        return label

    def encode(self, image: Image.Image, profile: EncodeProfile) -> bytes:
        """
        Encode ``image`` to AVIF with ``profile``.

        Modes the AVIF writer does not take (palette, greyscale, CMYK...) are
        converted to RGB, or RGBA when the source has transparency.

        Raises:
            ValueError: If the profile asks for something Pillow cannot write
        """
        if profile.compression != CompressionCodec.AV1:
            raise ValueError(f"unsupported compression: {profile.compression.value}")
        if profile.bit_depth not in SUPPORTED_BIT_DEPTHS:
            raise ValueError(f"unsupported bit depth: {profile.bit_depth}")

        prepared = image
        if image.mode not in ("RGB", "RGBA"):
            target_mode = "RGBA" if image.has_transparency_data else "RGB"
            prepared = image.convert(target_mode)

        output = io.BytesIO()
        try:
            prepared.save(output, format="AVIF", **profile.pillow_save_options())
        finally:
            if prepared is not image:
                prepared.close()
        return output.getvalue()

    def release(self, image: Image.Image) -> None:
        image.close()


@contextmanager
def scoped_image(codec: ImageCodecProtocol, image: Any) -> Iterator[Any]:
    """Yield ``image`` and release it through ``codec`` on every exit path."""
    try:
        yield image
    finally:
        codec.release(image)
