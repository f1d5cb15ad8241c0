# -*- coding: utf-8 -*-
"""
Constants and exceptions shared by the runtime, the drives and the commands.

The Control characters follow the naming used by pyte (https://github.com/selectel/pyte)
"""
import os
import sys

_RM_ROOT = os.path.realpath(os.path.abspath(
    os.path.dirname(os.path.dirname(__file__))))
_RM_CONFIG_FILES = ('.rm_config', 'rm.cfg')
_RM_USER_CONFIG_FILE = os.path.join(os.path.expanduser('~'), '.rm_config')

# Save the true error stream for logging
_SYS_STDERR = sys.stderr

# Drives A: to P:
DRIVE_LETTERS = 'ABCDEFGHIJKLMNOP'

# Error status understood by the CCP105 replacement command processor
POSTERROR = 0xFF12

EXIT_SUCCESS = 0
EXIT_ABORT = 1


class UsageError(Exception):
    """raised for a malformed command line; the message is shown before the usage text."""
    pass


class AbortRequested(Exception):
    """raised by the console when a Ctrl-C is pending."""
    pass


class Control(object):
    """
    Control characters seen by the console.
    """

    #: *End of text*: Ctrl-C, requests an abort.
    ETX = u"\u0003"

    #: *Horizontal tab*: Move cursor to the next tab stop.
    HT = u"\u0009"

    #: *Linefeed*
    LF = u"\n"

    #: *Carriage return*: Move cursor to left margin on current line.
    CR = u"\r"
