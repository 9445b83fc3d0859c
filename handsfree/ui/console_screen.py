"""Console screen rendering the session state with rich."""

import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..commands.reference import commands_by_section
from ..models.entities import CONTACT_FIELDS, CONFIRMATION_FIELDS, Contact, DraftContact, DraftConfirmation
from ..models.media import Recording
from ..models.modes import UIMode, CaptureMode
from ..models.state import AppState
from ..models.transcript import TranscriptOrigin

logger = logging.getLogger(__name__)


class ConsoleScreen:
    """Prints the current state of a hands-free session to the terminal."""

    def __init__(self, console: Optional[Console] = None, transcript_lines: int = 10):
        """Initialize console screen.

        Args:
            console: Rich console to print to
            transcript_lines: Number of transcript entries to show
        """
        self.console = console or Console()
        self.transcript_lines = transcript_lines

    def show_status(self, state: AppState, contacts: List[Contact],
                    interim_transcript: str = "", is_listening: bool = True,
                    photos: Sequence[Recording] = (),
                    recordings: Sequence[Recording] = ()) -> None:
        """Render status, mode, transcript and the active panel.

        Args:
            state: Current session state
            contacts: Saved contacts, shown in the contacts view
            interim_transcript: Live, not yet finalized text
            is_listening: Whether the recognition session is running
            photos: Captured photos, shown in the media view
            recordings: Finished recordings, shown in the media view
        """
        self.console.print()
        self.console.print("🎙️  Hands-Free Capture", style="bold blue")
        self.console.print("=" * 50)
        self.console.print("🔴 Listening..." if is_listening else "⏸️  Not listening")
        self.console.print(f"Status: {escape(state.status)}")
        self.console.print(f"Mode: [bold orange3]{state.mode_label()}[/bold orange3]")

        self._show_transcript(state)
        if interim_transcript:
            self.console.print(f"[bold]Live Transcript:[/bold] {escape(interim_transcript)}")

        if state.ui_mode == UIMode.CONTACTS:
            self._show_contacts(state, contacts)
        elif state.ui_mode == UIMode.MEDIA:
            self._show_media(photos, recordings)
            self._show_capture_in_progress(state)
        if state.show_commands:
            self._show_commands()
        self.console.print("=" * 50)

    def _show_transcript(self, state: AppState) -> None:
        entries = [e for e in state.transcript if e.origin == TranscriptOrigin.USER]
        if not entries:
            self.console.print("\n📝 Finalized transcripts will appear here...")
            return

        self.console.print("\n📝 Transcript:")
        for entry in entries[-self.transcript_lines:]:
            self.console.print(f"   {entry.timestamp.strftime('%H:%M:%S')} {escape(entry.text)}")
        if len(entries) > self.transcript_lines:
            self.console.print(f"   ... and {len(entries) - self.transcript_lines} earlier")

    def _show_contacts(self, state: AppState, contacts: List[Contact]) -> None:
        if state.capture_mode == CaptureMode.CONTACT and state.draft_contact is not None:
            self._show_draft("New Contact", state.draft_contact)
            return
        if state.capture_mode == CaptureMode.CONFIRMATION and state.draft_confirmation is not None:
            self._show_draft("New Confirmation", state.draft_confirmation)
            return

        table = Table(title="Contacts", show_header=True, header_style="bold magenta")
        table.add_column("Name", style="cyan")
        table.add_column("Status")
        table.add_column("Phone")
        table.add_column("Email")
        for contact in contacts:
            status_style = "green" if contact.status.value == "online" else "dim"
            table.add_row(
                escape(contact.name),
                f"[{status_style}]{contact.status.value}[/{status_style}]",
                escape(contact.phone or ""),
                escape(contact.email or ""),
            )
        self.console.print(table)

    def _show_media(self, photos: Sequence[Recording], recordings: Sequence[Recording]) -> None:
        for title, items, empty in (("Captured Photos", photos, "No photos yet."),
                                    ("Recordings", recordings, "No recordings yet.")):
            if not items:
                self.console.print(f"\n{title}: [dim]{empty}[/dim]")
                continue
            table = Table(title=title, show_header=True, header_style="bold magenta")
            table.add_column("Name", style="cyan")
            table.add_column("Type")
            table.add_column("Time")
            table.add_column("Length")
            for item in items:
                table.add_row(
                    escape(item.name),
                    item.type.value,
                    item.timestamp.strftime('%H:%M:%S'),
                    f"{item.duration:.0f}s" if item.duration is not None else "",
                )
            self.console.print(table)

    def _show_capture_in_progress(self, state: AppState) -> None:
        # Capture survives a detour to the camera; "show contacts" resumes it
        if state.capture_mode == CaptureMode.CONTACT and state.draft_contact is not None:
            self._show_draft("New Contact (paused)", state.draft_contact)
        elif state.capture_mode == CaptureMode.CONFIRMATION and state.draft_confirmation is not None:
            self._show_draft("New Confirmation (paused)", state.draft_confirmation)

    def _show_draft(self, title: str, draft) -> None:
        if isinstance(draft, DraftContact):
            labels = CONTACT_FIELDS
        elif isinstance(draft, DraftConfirmation):
            labels = CONFIRMATION_FIELDS
        else:
            raise TypeError(f"Unknown draft: {type(draft).__name__}")

        lines = [f"{label.capitalize()}: {escape(getattr(draft, label) or '...')}" for label in labels]
        self.console.print(Panel("\n".join(lines), title=title, style="bright_blue"))

    def _show_commands(self) -> None:
        table = Table(title="Voice Commands", show_header=False)
        table.add_column("Command", style="bold green")
        table.add_column("Description")
        for section, items in commands_by_section().items():
            table.add_row(f"[bold white]{section}[/bold white]", "")
            for item in items:
                table.add_row(escape(item.phrase), escape(item.description))
        self.console.print(table)
