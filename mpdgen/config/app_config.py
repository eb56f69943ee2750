import logging
import os
import threading
import tomllib
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field

from mpdgen import file_utils

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent.parent


class TranscoderSettings(BaseModel):
    video_codec: str = Field("libx264", description="Value passed to -codec:v")
    profile: str = Field("high", description="Encoding profile passed to -profile")
    threads: int = Field(0, description="Encoder threads, 0 lets ffmpeg decide")
    audio_codec: str = Field("libfdk_aac", description="Value passed to -codec:a")
    audio_bitrate: str = Field("128k", description="Value passed to -b:a")
    output_file_name: str = Field("out.mp4", description="File name of transcode and concat output")
    concat_list_file_name: str = Field("list.txt", description="Playlist written for the concat demuxer")
    audio_source_extension: str = Field(".mp3", description="Extension picked up by batch audio conversion")
    container_extension: str = Field(".mp4", description="Extension of converted and concatenated files")


class PackagerSettings(BaseModel):
    dash_profile: str = Field("live", description="Value passed to -dash-profile")
    video_mpd_file_name: str = "video.mpd"
    audio_mpd_file_name: str = "audio.mpd"
    manifest_file_name: str = "manifest.mpd"


# Default values can be overridden in app_config.toml
class AppConfig(BaseModel):
    app_name: str = "mpdgen"
    app_version: str = "0.0.0"

    ffmpeg_path: str = "/usr/local/bin/ffmpeg"
    mp4box_path: str = "/usr/bin/MP4Box"
    segment_duration: str = "1000"
    logs_dir: Path = Path("logs")

    transcoder: TranscoderSettings = Field(default_factory=TranscoderSettings)
    packager: PackagerSettings = Field(default_factory=PackagerSettings)


class ConfigManager:
    _instance: Optional[AppConfig] = None
    _lock = threading.Lock()

    def __init__(self):
        raise RuntimeError("Constructor is not allowed. Use get_config() method.")

    @classmethod
    def get_config(cls) -> AppConfig:
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    config = ConfigManager.load_config()
                    from mpdgen.config.config_validator import ConfigValidator
                    ConfigValidator.validate(config)
                    cls._instance = config
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._instance = None

    @staticmethod
    def load_config() -> AppConfig:
        load_dotenv(find_dotenv(usecwd=True))

        pyproject_file = BASE_DIR / "pyproject.toml"
        config_file = Path(os.getenv("MPDGEN_CONFIG_FILE", str(BASE_DIR / "app_config.toml")))

        project = {}
        if file_utils.check_file_exists(pyproject_file):
            with pyproject_file.open("rb") as f:
                project = tomllib.load(f).get("project", {})
        else:
            log.debug(f"pyproject.toml not found at {pyproject_file}, using default app metadata.")

        parameters = {}
        if file_utils.check_file_exists(config_file):
            with config_file.open("rb") as f:
                parameters = tomllib.load(f).get("params", {})
            log.debug(f"Loaded configuration from {config_file}")
        else:
            log.debug(f"Config file not found at {config_file}, using defaults.")

        if os.getenv("FFMPEG_PATH"):
            parameters["ffmpeg_path"] = os.getenv("FFMPEG_PATH")
        if os.getenv("MP4BOX_PATH"):
            parameters["mp4box_path"] = os.getenv("MP4BOX_PATH")

        metadata = {}
        if project.get("name"):
            metadata["app_name"] = project["name"]
        if project.get("version"):
            metadata["app_version"] = project["version"]

        return AppConfig(**metadata, **parameters)
