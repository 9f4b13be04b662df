"""glowlog: face-yoga check-ins, streak calendar and timelapse."""

__version__ = "0.1.0"
