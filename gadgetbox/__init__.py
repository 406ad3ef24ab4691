"""GadgetBox: turn one-off shell commands into reusable, named templates."""

__version__ = "0.1.0"
