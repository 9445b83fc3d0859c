"""Unit tests for the rich console screen."""

import io

import pytest
from rich.console import Console

from handsfree.models.entities import Contact, ContactStatus
from handsfree.models.media import Recording
from handsfree.models.modes import UIMode, RecordingType
from handsfree.models.transcript import TranscriptOrigin
from handsfree.ui.console_screen import ConsoleScreen


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def screen(output):
    return ConsoleScreen(console=Console(file=output, width=120, color_system=None), transcript_lines=2)


@pytest.mark.unit
class TestConsoleScreen:
    """Test cases for ConsoleScreen."""

    def test_shows_only_user_entries(self, screen, output, app_state):
        app_state.append_transcript("open camera", TranscriptOrigin.USER)
        app_state.set_status("Opened camera.")

        screen.show_status(app_state, [])

        text = output.getvalue()
        assert "open camera" in text
        assert "Status: Opened camera." in text
        assert "Mode: GENERAL LISTENING" in text

    def test_transcript_is_truncated(self, screen, output, app_state):
        for text in ["first", "second", "third"]:
            app_state.append_transcript(text, TranscriptOrigin.USER)

        screen.show_status(app_state, [])

        text = output.getvalue()
        assert "first" not in text
        assert "third" in text
        assert "and 1 earlier" in text

    def test_contacts_table(self, screen, output, app_state):
        app_state.ui_mode = UIMode.CONTACTS
        contacts = [Contact(id="seed_1", name="ROHACAN.HIRONS", status=ContactStatus.ONLINE)]

        screen.show_status(app_state, contacts)

        assert "ROHACAN.HIRONS" in output.getvalue()
        assert "online" in output.getvalue()

    def test_draft_panel_during_capture(self, screen, output, app_state):
        app_state.ui_mode = UIMode.CONTACTS
        app_state.enter_contact_capture()
        app_state.draft_contact.name = "Jane [Doe]"

        screen.show_status(app_state, [])

        assert "Jane [Doe]" in output.getvalue()

    def test_command_list_keeps_brackets(self, screen, output, app_state):
        app_state.show_commands = True

        screen.show_status(app_state, [])

        assert "name [full name]" in output.getvalue()

    def test_status_printed_once_when_not_listening(self, screen, output, app_state):
        app_state.set_status("Contact capture cancelled.")

        screen.show_status(app_state, [], is_listening=False)

        text = output.getvalue()
        assert text.count("Contact capture cancelled.") == 1
        assert "Not listening" in text

    def test_media_view_lists_photos_and_recordings(self, screen, output, app_state):
        app_state.ui_mode = UIMode.MEDIA
        photos = [Recording(name="photo-20240517_093000_001.jpg", type=RecordingType.PHOTO)]
        recordings = [Recording(name="video-20240517_093100_12s.webm", type=RecordingType.VIDEO, duration=12.2)]

        screen.show_status(app_state, [], photos=photos, recordings=recordings)

        text = output.getvalue()
        assert "Captured Photos" in text
        assert "photo-20240517_093000_001.jpg" in text
        assert "video-20240517_093100_12s.webm" in text
        assert "12s" in text

    def test_empty_media_view(self, screen, output, app_state):
        app_state.ui_mode = UIMode.MEDIA

        screen.show_status(app_state, [])

        assert "No photos yet." in output.getvalue()
        assert "No recordings yet." in output.getvalue()

    def test_media_view_shows_paused_capture(self, screen, output, app_state):
        app_state.enter_contact_capture()
        app_state.draft_contact.name = "Jane"
        app_state.ui_mode = UIMode.MEDIA

        screen.show_status(app_state, [])

        assert "New Contact (paused)" in output.getvalue()
        assert "Jane" in output.getvalue()
