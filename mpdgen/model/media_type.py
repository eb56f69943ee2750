from enum import Enum


class MediaType(str, Enum):
    VIDEO = "video"
    AUDIO = "audio"

    @property
    def stream_selector(self) -> str:
        return f"#{self.value}"
