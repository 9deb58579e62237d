"""Fixed AVIF encode profile applied to every conversion."""

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

AVIF_CONTENT_TYPE = "image/avif"

# Chroma subsampling is switched off at or above this quality in auto mode
AUTO_SUBSAMPLE_QUALITY_THRESHOLD = 90


class ChromaSubsampling(str, Enum):
    """Chroma subsampling modes."""

    AUTO = "auto"
    ON = "on"
    OFF = "off"


class CompressionCodec(str, Enum):
    """Compression codecs the AVIF container can carry."""

    AV1 = "av1"


class EncoderBackend(str, Enum):
    """AV1 encoder implementations understood by libavif."""

    AOM = "aom"
    RAV1E = "rav1e"
    SVT = "svt"


class EncodeProfile(BaseModel):
    """Immutable set of encoder parameters."""

    model_config = ConfigDict(frozen=True)

    version: str
    quality: int = Field(ge=0, le=100)
    bit_depth: int
    lossless: bool = False
    subsample_mode: ChromaSubsampling = ChromaSubsampling.AUTO
    compression: CompressionCodec = CompressionCodec.AV1
    encoder: EncoderBackend = EncoderBackend.AOM
    speed: int = Field(default=6, ge=0, le=10)

    def subsampling(self) -> str:
        """Resolve the subsampling mode to a concrete chroma layout."""
        if self.lossless or self.subsample_mode == ChromaSubsampling.OFF:
            return "4:4:4"
        if self.subsample_mode == ChromaSubsampling.ON:
            return "4:2:0"
        if self.quality >= AUTO_SUBSAMPLE_QUALITY_THRESHOLD:
            return "4:4:4"
        return "4:2:0"

    def pillow_save_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``Image.save(..., format="AVIF")``."""
        return {
            "quality": 100 if self.lossless else self.quality,
            "subsampling": self.subsampling(),
            "codec": self.encoder.value,
            "speed": self.speed,
            "range": "full",
        }


# Part of the output contract: identical input always yields identical bytes.
AVIF_PROFILE = EncodeProfile(
    version="1",
    quality=50,
    bit_depth=8,
    lossless=False,
    subsample_mode=ChromaSubsampling.AUTO,
    compression=CompressionCodec.AV1,
    encoder=EncoderBackend.AOM,
    speed=6,
)
