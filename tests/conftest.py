import tomllib
from pathlib import Path

import pytest

from mpdgen import file_utils
from mpdgen.config.app_config import AppConfig, ConfigManager, PackagerSettings, TranscoderSettings
from mpdgen.model.command_description import CommandDescription, ProcessResult
from mpdgen.process import CommandRunner, ProcessFailedError

BASE_DIR = Path(__file__).resolve().parent.parent

VIDEO_MPD = """<?xml version="1.0"?>
<!-- MPD file Generated with GPAC version 0.7.1-revrelease at 2019-05-10T10:12:01.000Z-->
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" minBufferTime="PT1.0S" type="static" mediaPresentationDuration="PT30.0S" maxSegmentDuration="PT0H0M1.000S" profiles="urn:mpeg:dash:profile:isoff-live:2011">
 <ProgramInformation moreInformationURL="http://gpac.io">
  <Title>video.mpd generated by GPAC</Title>
 </ProgramInformation>

 <Period duration="PT0H0M30.000S">
  <AdaptationSet segmentAlignment="true" maxWidth="1920" maxHeight="1080" maxFrameRate="30" par="16:9" lang="und">
   <Representation id="1" mimeType="video/mp4" codecs="avc1.64001f" width="1920" height="1080" frameRate="30/1" sar="1:1" startWithSAP="1" bandwidth="2000000">
    <SegmentTemplate media="video$Number$.m4s" initialization="videoinit.mp4" timescale="1000" startNumber="1" duration="1000"/>
   </Representation>
  </AdaptationSet>
 </Period>
</MPD>
"""

AUDIO_MPD = """<?xml version="1.0"?>
<!-- MPD file Generated with GPAC version 0.7.1-revrelease at 2019-05-10T10:12:02.000Z-->
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" minBufferTime="PT1.5S" type="static" mediaPresentationDuration="PT30.023S" maxSegmentDuration="PT0H0M1.022S" profiles="urn:mpeg:dash:profile:isoff-live:2011">
 <ProgramInformation moreInformationURL="http://gpac.io">
  <Title>audio.mpd generated by GPAC</Title>
 </ProgramInformation>

 <Period duration="PT0H0M30.023S">
  <AdaptationSet segmentAlignment="true" lang="und">
   <Representation id="1" mimeType="audio/mp4" codecs="mp4a.40.2" audioSamplingRate="44100" startWithSAP="1" bandwidth="128000">
    <AudioChannelConfiguration schemeIdUri="urn:mpeg:dash:23003:3:audio_channel_configuration:2011" value="2"/>
    <SegmentTemplate media="audio$Number$.m4s" initialization="audioinit.mp4" timescale="44100" startNumber="1" duration="44100"/>
   </Representation>
  </AdaptationSet>
 </Period>
</MPD>
"""


class FakeRunner(CommandRunner):
    """
    Records commands instead of running them.

    When a command carries ``-out <path>`` and the file name is a key of ``outputs``,
    the mapped text is written there, the way MP4Box would write its manifest.
    """

    def __init__(self, outputs: dict[str, str] | None = None, fail_on_call: int | None = None):
        self.commands: list[CommandDescription] = []
        self.outputs = outputs or {}
        self.fail_on_call = fail_on_call

    def run(self, command: CommandDescription) -> ProcessResult:
        self.commands.append(command)

        if self.fail_on_call is not None and len(self.commands) - 1 == self.fail_on_call:
            raise ProcessFailedError("fake failure", command, return_code=1, stdout="", stderr="boom")

        if "-out" in command.args:
            out_path = Path(command.args[command.args.index("-out") + 1])
            if out_path.name in self.outputs:
                out_path.write_text(self.outputs[out_path.name], encoding="utf-8")

        return ProcessResult(command=command, return_code=0)


@pytest.fixture
def video_mpd_text() -> str:
    return VIDEO_MPD


@pytest.fixture
def audio_mpd_text() -> str:
    return AUDIO_MPD


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner(outputs={"video.mpd": VIDEO_MPD, "audio.mpd": AUDIO_MPD})


@pytest.fixture
def mock_app_config(monkeypatch, tmp_path) -> AppConfig:
    pyproject_file = BASE_DIR / "pyproject.toml"

    if not file_utils.check_file_exists(pyproject_file):
        raise FileNotFoundError("pyproject.toml not found. Expected location: {}".format(pyproject_file))

    with pyproject_file.open("rb") as f:
        project = tomllib.load(f).get("project")

    test_app_config = AppConfig(
        app_name=project.get("name"),
        app_version=project.get("version"),

        ffmpeg_path="ffmpeg",
        mp4box_path="MP4Box",
        segment_duration="1000",
        logs_dir=tmp_path / "logs",

        transcoder=TranscoderSettings(),
        packager=PackagerSettings(),
    )

    monkeypatch.setattr(ConfigManager, "get_config", lambda: test_app_config)

    return test_app_config


@pytest.fixture
def runner_factory():
    def make(outputs: dict[str, str] | None = None, fail_on_call: int | None = None) -> FakeRunner:
        return FakeRunner(outputs=outputs, fail_on_call=fail_on_call)

    return make
