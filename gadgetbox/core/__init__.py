"""Core logic: command analysis, templates and the gadget store."""
