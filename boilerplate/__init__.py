"""web-boilerplate: create a basic HTML/CSS/JS project skeleton."""

__version__ = "1.0.0"
