"""Gadget module for saved command templates.

This module provides:
- Gadget / GadgetUpdate: Data models for stored gadgets and edit requests
- GadgetStore: JSON file repository for gadget persistence
- create_gadget, edit_gadget, delete_gadget: Validated mutations
- reconcile_variables: Align variable descriptions with a command
- GadgetExecutor, bind_arguments: Fill placeholders for execution
"""

from gadgetbox.core.gadgets.executor import (
    DEFAULT_VARIABLE_DESCRIPTION,
    GadgetExecutor,
    bind_arguments,
    describe_variable,
)
from gadgetbox.core.gadgets.models import Gadget, GadgetUpdate
from gadgetbox.core.gadgets.operations import (
    create_gadget,
    delete_gadget,
    edit_gadget,
    is_valid_gadget_name,
    reconcile_variables,
    validate_command,
    validate_gadget_name,
)
from gadgetbox.core.gadgets.repository import GadgetStore

__all__ = [
    "DEFAULT_VARIABLE_DESCRIPTION",
    "Gadget",
    "GadgetExecutor",
    "GadgetStore",
    "GadgetUpdate",
    "bind_arguments",
    "create_gadget",
    "delete_gadget",
    "describe_variable",
    "edit_gadget",
    "is_valid_gadget_name",
    "reconcile_variables",
    "validate_command",
    "validate_gadget_name",
]
