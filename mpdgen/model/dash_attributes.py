from pydantic import BaseModel, ConfigDict


class VideoAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_buffer_time: str
    media_presentation_duration: str
    codecs: str
    par: str
    width: str
    height: str
    frame_rate: str
    bandwidth: str
    timescale: str
    duration: str


class AudioAttributes(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_buffer_time: str
    media_presentation_duration: str
    codecs: str
    audio_sampling_rate: str
    bandwidth: str
    timescale: str
    duration: str
