"""Tests for property and recording builders."""

import pytest

from adapters.openvidu.builders import (
    RecordingBuilder,
    RecordingPropertiesBuilder,
    SessionPropertiesBuilder,
)
from adapters.openvidu.recording import RecordingProperties
from adapters.openvidu.session_properties import SessionProperties
from core.enums import MediaMode, OutputMode, RecordingLayout, RecordingMode


NON_MAPPINGS = [None, "hasAudio", 42, ["hasAudio", True], ("mediaMode",)]


# =============================================================================
# RecordingPropertiesBuilder
# =============================================================================


class TestRecordingPropertiesDefaults:
    """Absent keys fall back to documented defaults."""

    def test_empty_mapping(self):
        """An empty mapping yields every default."""
        props = RecordingPropertiesBuilder.build({})

        assert props.has_audio is True
        assert props.has_video is True
        assert props.name == RecordingLayout.BEST_FIT
        assert props.output_mode == OutputMode.COMPOSED
        assert props.recording_layout == RecordingLayout.BEST_FIT
        assert props.resolution is None

    def test_custom_layout_default(self):
        """customLayout defaults to the ROUTED media mode value."""
        props = RecordingPropertiesBuilder.build({})
        assert props.custom_layout == MediaMode.ROUTED

    def test_matches_dataclass_defaults(self):
        """Builder defaults equal a default-constructed RecordingProperties."""
        assert RecordingPropertiesBuilder.build({}) == RecordingProperties()


class TestRecordingPropertiesPresentKeys:
    """Present keys are used verbatim."""

    def test_false_is_kept(self):
        """A False value is not replaced by the default."""
        props = RecordingPropertiesBuilder.build({"hasAudio": False})

        assert props.has_audio is False
        assert props.has_video is True

    def test_none_is_kept(self):
        """A None value is not replaced by the default."""
        props = RecordingPropertiesBuilder.build({"name": None, "outputMode": None})

        assert props.name is None
        assert props.output_mode is None

    def test_all_keys(self):
        """Every recording key is read."""
        props = RecordingPropertiesBuilder.build({
            "hasAudio": False,
            "hasVideo": False,
            "name": "weekly-sync",
            "outputMode": "INDIVIDUAL",
            "recordingLayout": "CUSTOM",
            "customLayout": "layouts/grid",
            "resolution": "1280x720",
        })

        assert props == RecordingProperties(
            has_audio=False,
            has_video=False,
            name="weekly-sync",
            output_mode="INDIVIDUAL",
            recording_layout="CUSTOM",
            custom_layout="layouts/grid",
            resolution="1280x720",
        )

    def test_invalid_enum_value_passes_through(self):
        """Enum values are not validated."""
        props = RecordingPropertiesBuilder.build({"outputMode": "NOT_A_MODE"})
        assert props.output_mode == "NOT_A_MODE"

    def test_unknown_keys_ignored(self):
        """Keys that are not recording properties are ignored."""
        props = RecordingPropertiesBuilder.build({"id": "rec1", "status": "ready"})
        assert props == RecordingProperties()

    @pytest.mark.parametrize("value", NON_MAPPINGS)
    def test_non_mapping_returns_none(self, value):
        """Non-mapping input yields None."""
        assert RecordingPropertiesBuilder.build(value) is None


# =============================================================================
# SessionPropertiesBuilder
# =============================================================================


class TestSessionPropertiesBuilder:
    """Tests for SessionPropertiesBuilder."""

    def test_defaults(self):
        """An empty mapping yields every default."""
        props = SessionPropertiesBuilder.build({})

        assert props.media_mode == MediaMode.ROUTED
        assert props.recording_mode == RecordingMode.MANUAL
        assert props.default_output_mode == OutputMode.COMPOSED
        assert props.default_recording_layout == RecordingLayout.BEST_FIT
        assert props.custom_session_id is None
        assert props.default_custom_layout is None

    def test_all_keys(self):
        """Every session key is read."""
        props = SessionPropertiesBuilder.build({
            "mediaMode": "RELAYED",
            "recordingMode": "ALWAYS",
            "defaultOutputMode": "INDIVIDUAL",
            "defaultRecordingLayout": "CUSTOM",
            "customSessionId": "weekly-sync",
            "defaultCustomLayout": "layouts/grid",
        })

        assert props == SessionProperties(
            media_mode="RELAYED",
            recording_mode="ALWAYS",
            default_output_mode="INDIVIDUAL",
            default_recording_layout="CUSTOM",
            custom_session_id="weekly-sync",
            default_custom_layout="layouts/grid",
        )

    def test_none_is_kept(self):
        """A None value is not replaced by the default."""
        props = SessionPropertiesBuilder.build({"mediaMode": None})

        assert props.media_mode is None
        assert props.recording_mode == RecordingMode.MANUAL

    @pytest.mark.parametrize("value", NON_MAPPINGS)
    def test_non_mapping_returns_none(self, value):
        """Non-mapping input yields None."""
        assert SessionPropertiesBuilder.build(value) is None

    def test_to_dict_omits_unset_optionals(self):
        """Serialization leaves out optional fields that are None."""
        assert SessionPropertiesBuilder.build({}).to_dict() == {
            "mediaMode": "ROUTED",
            "recordingMode": "MANUAL",
            "defaultOutputMode": "COMPOSED",
            "defaultRecordingLayout": "BEST_FIT",
        }


# =============================================================================
# RecordingBuilder
# =============================================================================


@pytest.fixture
def recording_data():
    """Recording mapping as returned by the OpenVidu REST API."""
    return {
        "id": "ses_YnDaGYNcd7",
        "sessionId": "ses_YnDaGYNcd7",
        "createdAt": 1538481996019,
        "size": 7765120,
        "duration": 12.3,
        "url": "https://localhost:4443/recordings/ses_YnDaGYNcd7/ses_YnDaGYNcd7.mp4",
        "name": "ses_YnDaGYNcd7",
        "outputMode": "COMPOSED",
        "hasAudio": True,
        "hasVideo": True,
        "recordingLayout": "BEST_FIT",
        "resolution": "1920x1080",
    }


class TestRecordingBuilder:
    """Tests for RecordingBuilder."""

    def test_builds_recording(self, recording_data):
        """Identifying fields and properties are read."""
        recording = RecordingBuilder.build(recording_data)

        assert recording.id == "ses_YnDaGYNcd7"
        assert recording.session_id == "ses_YnDaGYNcd7"
        assert recording.created_at == 1538481996019
        assert recording.size == 7765120
        assert recording.duration == 12.3
        assert recording.url.endswith(".mp4")
        assert recording.properties.resolution == "1920x1080"
        assert recording.properties.name == "ses_YnDaGYNcd7"

    def test_properties_use_defaults(self, recording_data):
        """Missing property keys fall back to defaults."""
        del recording_data["hasAudio"]
        recording = RecordingBuilder.build(recording_data)

        assert recording.properties.has_audio is True
        assert recording.properties.custom_layout == MediaMode.ROUTED

    @pytest.mark.parametrize("key", ["id", "sessionId", "createdAt", "size", "duration", "url"])
    def test_missing_required_key_raises(self, recording_data, key):
        """Identifying keys are required."""
        del recording_data[key]
        with pytest.raises(KeyError):
            RecordingBuilder.build(recording_data)

    def test_non_mapping_returns_none(self):
        """Non-mapping input yields None."""
        assert RecordingBuilder.build(None) is None

    def test_to_dict_flattens_properties(self, recording_data):
        """Serialization merges properties into the recording mapping."""
        data = RecordingBuilder.build(recording_data).to_dict()

        assert data["id"] == "ses_YnDaGYNcd7"
        assert data["resolution"] == "1920x1080"
        assert data["customLayout"] == "ROUTED"
