import logging

from mpdgen.model.dash_attributes import AudioAttributes, VideoAttributes

log = logging.getLogger(__name__)

# Layout, attribute order and whitespace are kept stable for player compatibility.
MPD_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" ?>
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" minBufferTime="{video.min_buffer_time}" type="static" mediaPresentationDuration="{video.media_presentation_duration}" profiles="urn:mpeg:dash:profile:isoff-live:2011">
  <Period> 
    <AdaptationSet segmentAlignment="true" mimeType="video/mp4" codecs="{video.codecs}" par="{video.par}">
      <Representation width="{video.width}" height="{video.height}" frameRate="{video.frame_rate}" id="1" bandwidth="{video.bandwidth}">
        <SegmentTemplate timescale="{video.timescale}" duration="{video.duration}" startNumber="1" media="video$Number$.m4s" initialization="videoinit.mp4"/>
      </Representation>
    </AdaptationSet>
    <AdaptationSet mimeType="audio/mp4" codecs="{audio.codecs}" streamName="stereo">
      <Representation audioSamplingRate="{audio.audio_sampling_rate}" id="2" bandwidth="{audio.bandwidth}">
        <SegmentTemplate timescale="{audio.timescale}"  startNumber="1" media="audio$Number$.m4s" initialization="audioinit.mp4" duration="{audio.duration}"/>
      </Representation>
    </AdaptationSet>
  </Period>
</MPD>"""


def compose_manifest(video: VideoAttributes, audio: AudioAttributes) -> str:
    """
    Fills the static single-period manifest with the extracted values.
    Values are inserted as-is, nothing is escaped.
    """
    log.debug("Composing manifest.")
    log.debug("|-Video codecs: %s", video.codecs)
    log.debug("|-Audio codecs: %s", audio.codecs)
    return MPD_TEMPLATE.format(video=video, audio=audio)
