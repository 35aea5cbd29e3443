"""DayDiary - a personal diary with emotion tracking and monthly views."""

__version__ = "0.1.0"
