"""Voice command reference shown by the "commands list" command."""

from typing import Dict, List, NamedTuple


class CommandHelp(NamedTuple):
    section: str
    phrase: str
    description: str


COMMAND_REFERENCE: List[CommandHelp] = [
    CommandHelp("Global Commands", "commands list", "Shows this list of commands."),
    CommandHelp("Global Commands", "close list / hide commands", "Hides this list of commands."),
    CommandHelp("Global Commands", "show contacts", "Opens the contact management view."),
    CommandHelp("Global Commands", "open camera / open media", "Opens the camera and media recording view."),
    CommandHelp("Global Commands", "show calendar / open calendar", "Opens the calendar and reminders view."),
    CommandHelp("Global Commands", "return to main", "Closes any open view and returns to the main screen."),
    CommandHelp("Global Commands", "capture contact", "Opens the panel to add a new contact."),
    CommandHelp("Global Commands", "capture confirmation", "Opens the panel to add a new confirmation."),
    CommandHelp("Contact Capture", "name [full name]", "Sets the contact's name. Ex: 'name Jane Doe'"),
    CommandHelp("Contact Capture", "phone [phone number]", "Sets the phone number. Ex: 'phone 555 123 4567'"),
    CommandHelp("Contact Capture", "email [email address]", "Sets the email. Ex: 'email jane@example.com'"),
    CommandHelp("Contact Capture", "details [notes]", "Adds notes about the contact."),
    CommandHelp("Contact Capture", "save contact", "Saves the new contact information."),
    CommandHelp("Contact Capture", "cancel contact", "Cancels adding the new contact."),
    CommandHelp("Confirmation Capture", "type [booking, order, etc.]", "Sets the confirmation type."),
    CommandHelp("Confirmation Capture", "name [airline, hotel, etc.]", "Sets the associated name for the confirmation."),
    CommandHelp("Confirmation Capture", "number [confirmation #]", "Sets the confirmation number. Ex: 'number 123xyz'"),
    CommandHelp("Confirmation Capture", "save confirmation", "Saves the new confirmation."),
    CommandHelp("Confirmation Capture", "cancel confirmation", "Cancels adding the new confirmation."),
    CommandHelp("Media Commands", "take a picture / take a photo [count] [timer N]",
                "Captures photos. Ex: 'take a picture 5 timer 3'"),
    CommandHelp("Media Commands", "photo timer [N]", "Takes a single photo after an N second countdown."),
    CommandHelp("Media Commands", "record video [for X seconds/minutes]", "Records video. Specify an optional duration."),
    CommandHelp("Media Commands", "record sound [for X seconds/minutes]", "Records audio. Specify an optional duration."),
    CommandHelp("Media Commands", "stop recording", "Stops an active video recording."),
    CommandHelp("Media Commands", "stop audio recording", "Stops an active audio recording."),
    CommandHelp("Media Commands", "switch camera", "Switches between front and back cameras."),
]


def commands_by_section() -> Dict[str, List[CommandHelp]]:
    """Group the reference by section, preserving order."""
    sections: Dict[str, List[CommandHelp]] = {}
    for item in COMMAND_REFERENCE:
        sections.setdefault(item.section, []).append(item)
    return sections
