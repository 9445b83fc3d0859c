"""Unit tests for the command matcher rule table."""

import pytest

from handsfree.commands.matcher import CommandMatcher, parse_photo_params, parse_duration
from handsfree.models.actions import (
    ShowCommands,
    HideCommands,
    MediaAction,
    SetContactField,
    SetConfirmationField,
    SaveContact,
    CancelContact,
    SaveConfirmation,
    CancelConfirmation,
    Navigate,
    CaptureContact,
    CaptureConfirmation,
    Unknown,
)
from handsfree.models.media import (
    TakePhotos,
    TakePhotoTimer,
    RecordVideo,
    RecordAudio,
    StopRecording,
    StopAudioRecording,
    SwitchCamera,
)
from handsfree.models.modes import CaptureMode, UIMode


def interpret(interpreter, text, mode=CaptureMode.GENERAL):
    return interpreter.interpret(text, mode)


@pytest.mark.unit
class TestPhotoCommands:
    """Photo trigger parsing."""

    def test_count_and_timer(self, interpreter):
        assert interpret(interpreter, "take a picture 5 timer 3") == MediaAction(TakePhotos(count=5, delay=3))

    def test_timer_only(self, interpreter):
        assert interpret(interpreter, "take a picture timer 3") == MediaAction(TakePhotos(count=1, delay=3))

    def test_defaults(self, interpreter):
        assert interpret(interpreter, "take a picture") == MediaAction(TakePhotos(count=1, delay=0))

    def test_spoken_numbers(self, interpreter):
        assert interpret(interpreter, "Take a photo five timer three") == MediaAction(TakePhotos(count=5, delay=3))

    def test_trigger_inside_longer_sentence(self, interpreter):
        assert interpret(interpreter, "please take a photo 2") == MediaAction(TakePhotos(count=2, delay=0))

    def test_tense_variants(self, interpreter):
        assert interpret(interpreter, "taking a picture") == MediaAction(TakePhotos())
        assert interpret(interpreter, "take pictures 4") == MediaAction(TakePhotos(count=4, delay=0))

    def test_photo_timer(self, interpreter):
        assert interpret(interpreter, "photo timer 5") == MediaAction(TakePhotoTimer(duration=5))
        assert interpret(interpreter, "photo timer") == MediaAction(TakePhotoTimer(duration=3))

    def test_photo_timer_default_is_configurable(self):
        matcher = CommandMatcher(photo_timer_default=10)
        action = matcher.match("photo timer", "photo timer", CaptureMode.GENERAL)
        assert action == MediaAction(TakePhotoTimer(duration=10))

    @pytest.mark.parametrize("params,expected", [
        ("", (1, 0)),
        ("5 timer 3", (5, 3)),
        ("timer 3", (1, 3)),
        ("timer", (1, 0)),
        ("timer soon", (1, 0)),
        ("lots timer 2", (1, 2)),
        ("0", (1, 0)),
        ("3s", (3, 0)),
    ])
    def test_parse_photo_params_falls_back_to_defaults(self, params, expected):
        assert parse_photo_params(params) == expected


@pytest.mark.unit
class TestRecordingCommands:
    """Recording triggers and duration extraction."""

    def test_minutes_are_converted(self, interpreter):
        assert interpret(interpreter, "record video for 2 minutes") == MediaAction(RecordVideo(duration=120))

    def test_seconds(self, interpreter):
        assert interpret(interpreter, "record video for 45") == MediaAction(RecordVideo(duration=45))

    def test_no_duration_is_open_ended(self, interpreter):
        assert interpret(interpreter, "record video") == MediaAction(RecordVideo(duration=None))

    def test_record_sound_with_spoken_minute(self, interpreter):
        assert interpret(interpreter, "record sound for one minute") == MediaAction(RecordAudio(duration=60))

    def test_parse_duration(self):
        assert parse_duration("record video 30 seconds") == 30
        assert parse_duration("record video") is None

    def test_stop_recording(self, interpreter):
        assert interpret(interpreter, "stop recording") == MediaAction(StopRecording())

    @pytest.mark.parametrize("phrase", [
        "stop audio recording",
        "stop recording sound",
        "stop sound recording",
    ])
    def test_dedicated_audio_stop_wins_over_generic_stop(self, interpreter, phrase):
        assert interpret(interpreter, phrase) == MediaAction(StopAudioRecording())

    def test_switch_camera(self, interpreter):
        assert interpret(interpreter, "Switch camera") == MediaAction(SwitchCamera())


@pytest.mark.unit
class TestContactFields:
    """Contact capture field commands."""

    @pytest.mark.parametrize("utterance,field,value", [
        ("name Jane Doe", "name", "Jane Doe"),
        ("Phone 555 123 4567", "phone", "555 123 4567"),
        ("email jane@example.com", "email", "jane@example.com"),
        ("details Met at the Mars conference", "details", "Met at the Mars conference"),
    ])
    def test_field_value_keeps_original_case(self, interpreter, utterance, field, value):
        action = interpret(interpreter, utterance, CaptureMode.CONTACT)
        assert action == SetContactField(field=field, value=value)

    def test_number_words_are_not_converted_in_contact_fields(self, interpreter):
        action = interpret(interpreter, "phone five five five", CaptureMode.CONTACT)
        assert action == SetContactField(field="phone", value="five five five")

    def test_field_commands_ignored_outside_contact_capture(self, interpreter):
        assert interpret(interpreter, "name Jane") == Unknown(raw_text="name Jane")

    def test_unknown_first_token_falls_through(self, interpreter):
        assert interpret(interpreter, "save contact", CaptureMode.CONTACT) == SaveContact()

    def test_meta_and_media_preempt_field_commands(self, interpreter):
        assert interpret(interpreter, "commands list", CaptureMode.CONTACT) == ShowCommands()
        action = interpret(interpreter, "details record video", CaptureMode.CONTACT)
        assert action == MediaAction(RecordVideo())


@pytest.mark.unit
class TestConfirmationFields:
    """Confirmation capture keyword scanning."""

    def test_spoken_number_becomes_digits(self, interpreter):
        action = interpret(interpreter, "number one two three", CaptureMode.CONFIRMATION)
        assert action == SetConfirmationField(field="number", value="123")

    def test_number_strips_all_whitespace(self, interpreter):
        action = interpret(interpreter, "Number AB one 2 C", CaptureMode.CONFIRMATION)
        assert action == SetConfirmationField(field="number", value="AB12C")

    def test_first_textual_keyword_wins(self, interpreter):
        action = interpret(interpreter, "name it Delta for type flight", CaptureMode.CONFIRMATION)
        assert action == SetConfirmationField(field="name", value="it Delta for type flight")

    def test_keyword_may_appear_mid_utterance(self, interpreter):
        action = interpret(interpreter, "the type is Hotel", CaptureMode.CONFIRMATION)
        assert action == SetConfirmationField(field="type", value="is Hotel")

    def test_no_keyword_falls_through(self, interpreter):
        assert interpret(interpreter, "save confirmation", CaptureMode.CONFIRMATION) == SaveConfirmation()
        assert interpret(interpreter, "capture contact", CaptureMode.CONFIRMATION) == CaptureContact()

    def test_keywords_ignored_outside_confirmation_capture(self, interpreter):
        assert interpret(interpreter, "number one two") == Unknown(raw_text="number one two")


@pytest.mark.unit
class TestGlobalCommands:
    """Meta, save/cancel, navigation and unknown commands."""

    def test_meta_commands(self, interpreter):
        assert interpret(interpreter, "Commands list") == ShowCommands()
        assert interpret(interpreter, "close list") == HideCommands()
        assert interpret(interpreter, "hide commands") == HideCommands()

    def test_meta_commands_are_exact(self, interpreter):
        assert interpret(interpreter, "commands list now") == Unknown(raw_text="commands list now")

    def test_save_and_cancel_phrases(self, interpreter):
        assert interpret(interpreter, "save contact") == SaveContact()
        assert interpret(interpreter, "cancel contact") == CancelContact()
        assert interpret(interpreter, "save confirmation") == SaveConfirmation()
        assert interpret(interpreter, "cancel confirmation") == CancelConfirmation()

    @pytest.mark.parametrize("utterance,target", [
        ("show contacts", UIMode.CONTACTS),
        ("show contacts please", UIMode.CONTACTS),
        ("open camera", UIMode.MEDIA),
        ("open media", UIMode.MEDIA),
        ("open calendar", UIMode.CALENDAR),
        ("show calendar", UIMode.CALENDAR),
        ("return to main", UIMode.MAIN),
        ("close camera", UIMode.MAIN),
        ("close contacts", UIMode.MAIN),
        ("close calendar", UIMode.MAIN),
    ])
    def test_navigation_prefixes(self, interpreter, utterance, target):
        assert interpret(interpreter, utterance) == Navigate(target=target)

    def test_navigation_is_prefix_only(self, interpreter):
        assert interpret(interpreter, "please show contacts") == Unknown(raw_text="please show contacts")

    def test_capture_commands(self, interpreter):
        assert interpret(interpreter, "capture contact") == CaptureContact()
        assert interpret(interpreter, "Capture Confirmation") == CaptureConfirmation()

    def test_unknown_keeps_raw_text(self, interpreter):
        assert interpret(interpreter, "  Hello There ") == Unknown(raw_text="Hello There")
