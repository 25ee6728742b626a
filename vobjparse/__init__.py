"""Parse, build and write vCard and iCalendar (VObject) data."""

__version__ = "0.8.0"