"""
Pulls single attribute values out of the intermediate manifests written by MP4Box.

The text is never parsed as XML. Each attribute is located with a regular expression
of the form ``name="<charset>*"`` and must occur exactly once in the whole document.
Video and audio share the same routine; only the attribute table differs.
"""
import logging
import re
from typing import Dict, Sequence

from pydantic import BaseModel, ConfigDict

from mpdgen.extractor.attribute_extraction_error import (
    AttributeAmbiguousError,
    AttributeEmptyError,
    AttributeNotFoundError,
)
from mpdgen.model.dash_attributes import AudioAttributes, VideoAttributes

log = logging.getLogger(__name__)

ISO_DURATION_CHARSET = "PYMDTHMS0-9."
CODECS_CHARSET = "A-Za-z0-9._-"
DIGITS_CHARSET = "0-9"
FRAME_RATE_CHARSET = "0-9/"
ASPECT_RATIO_CHARSET = "0-9:"


class AttributePattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    attribute: str
    field: str
    charset: str
    prefix: str = ""

    @property
    def opening(self) -> str:
        return f'{self.prefix}{self.attribute}="'

    def compile(self) -> re.Pattern:
        return re.compile(f"{re.escape(self.opening)}[{self.charset}]*\"")


VIDEO_ATTRIBUTE_PATTERNS: Sequence[AttributePattern] = (
    AttributePattern(attribute="minBufferTime", field="min_buffer_time", charset=ISO_DURATION_CHARSET),
    AttributePattern(attribute="mediaPresentationDuration", field="media_presentation_duration", charset=ISO_DURATION_CHARSET),
    AttributePattern(attribute="codecs", field="codecs", charset=CODECS_CHARSET),
    AttributePattern(attribute="par", field="par", charset=ASPECT_RATIO_CHARSET),
    # leading space keeps bandwidth="..." from matching
    AttributePattern(attribute="width", field="width", charset=DIGITS_CHARSET, prefix=" "),
    AttributePattern(attribute="height", field="height", charset=DIGITS_CHARSET),
    AttributePattern(attribute="frameRate", field="frame_rate", charset=FRAME_RATE_CHARSET),
    AttributePattern(attribute="bandwidth", field="bandwidth", charset=DIGITS_CHARSET),
    AttributePattern(attribute="timescale", field="timescale", charset=DIGITS_CHARSET),
    AttributePattern(attribute="duration", field="duration", charset=DIGITS_CHARSET),
)

AUDIO_ATTRIBUTE_PATTERNS: Sequence[AttributePattern] = (
    AttributePattern(attribute="minBufferTime", field="min_buffer_time", charset=ISO_DURATION_CHARSET),
    AttributePattern(attribute="mediaPresentationDuration", field="media_presentation_duration", charset=ISO_DURATION_CHARSET),
    AttributePattern(attribute="codecs", field="codecs", charset=CODECS_CHARSET),
    AttributePattern(attribute="audioSamplingRate", field="audio_sampling_rate", charset=DIGITS_CHARSET),
    AttributePattern(attribute="bandwidth", field="bandwidth", charset=DIGITS_CHARSET),
    AttributePattern(attribute="timescale", field="timescale", charset=DIGITS_CHARSET),
    AttributePattern(attribute="duration", field="duration", charset=DIGITS_CHARSET),
)


def extract_attribute(text: str, pattern: AttributePattern) -> str:
    matches = pattern.compile().findall(text)

    if not matches:
        log.error(f"Attribute '{pattern.attribute}' not found in manifest.")
        raise AttributeNotFoundError(pattern.attribute)
    if len(matches) > 1:
        log.error(f"Attribute '{pattern.attribute}' is ambiguous.")
        log.error("|-Matches: %s", matches)
        raise AttributeAmbiguousError(pattern.attribute, len(matches))

    value = matches[0][len(pattern.opening):-1]
    if not value:
        log.error(f"Attribute '{pattern.attribute}' has an empty value.")
        raise AttributeEmptyError(pattern.attribute)

    return value


def extract_attributes(text: str, patterns: Sequence[AttributePattern]) -> Dict[str, str]:
    return {pattern.field: extract_attribute(text, pattern) for pattern in patterns}


def extract_video_attributes(text: str) -> VideoAttributes:
    video_attributes = VideoAttributes(**extract_attributes(text, VIDEO_ATTRIBUTE_PATTERNS))
    log.debug(f"Video attributes extracted: {video_attributes}")
    return video_attributes


def extract_audio_attributes(text: str) -> AudioAttributes:
    audio_attributes = AudioAttributes(**extract_attributes(text, AUDIO_ATTRIBUTE_PATTERNS))
    log.debug(f"Audio attributes extracted: {audio_attributes}")
    return audio_attributes
