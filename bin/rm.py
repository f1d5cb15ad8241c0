#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Remove (delete) files from CP/M drives, more or less in the style of Unix rm.

usage: rm [-f] [-i] [-q] [-] filename [filename...]

  -f  delete files, even if read-only
  -i  query before deleting each file
  -q  "quiet" mode, no message for deleted files
  -   designates that filenames follow
"""

import logging
import sys
from collections import namedtuple

from ..core import CpmEnvironment, __version__
from ..lib.cpmfs import OperationFailure
from ..system.shcommon import EXIT_ABORT, EXIT_SUCCESS, POSTERROR, AbortRequested, UsageError
from ..system.shcommon import Control as ctrl

LOGGER = logging.getLogger('cpmrm.rm')

Options = namedtuple('Options', ['force', 'interactive', 'quiet', 'filenames'])

# per file outcomes
DELETED = 'deleted'
NOT_FOUND = 'not_found'
READ_ONLY = 'read_only'
DECLINED = 'declined'
FAILED = 'failed'

USAGE = (
    "\nReMove file utility\t Version: " + __version__ + "\t\t(c) 1987 M. Kersenbrock"
    "\n\nUsage: rm [-f] [-i] [-q] [-] filename [filename...]"
    "\n\t\t-f => Delete files, even if read-only"
    "\n\t\t-i => Query before deleting each file"
    "\n\t\t-q => \"Quiet\" mode"
    "\n\t\t-  => Designates that filenames follow\n"
)

_FLAGS = {
    '-f': 'force',
    '-i': 'interactive',
    '-q': 'quiet',
}


def usage(console):
    console.write_err(USAGE)


def parse_args(args):
    """
    Parse the command line into Options.
    Raises UsageError for an unknown option or when no filenames are given.
    """
    # Not using argparse here, because everything after the first
    # filename or a bare '-' has to be taken literally.
    flags = dict.fromkeys(_FLAGS.values(), False)
    i = 0
    while i < len(args):
        arg = args[i]
        if not arg.startswith('-'):
            break
        i += 1
        if arg == '-':
            break
        if arg not in _FLAGS:
            raise UsageError('Unknown option: ' + arg)
        flags[_FLAGS[arg]] = True

    filenames = tuple(args[i:])
    if not filenames:
        raise UsageError('\nFilename(s) are missing\n')
    return Options(filenames=filenames, **flags)


def get_reply(console, max_length=6):
    """
    Read a reply line from the console and return its first character,
    or '' if the reply was empty.
    """
    length, text = console.read_line(max_length)
    if length >= 1:
        return text[0]
    return ''


def rm(name, options, drives, console, reply_max=6):
    """
    Delete a single file and return the outcome.
    """
    try:
        fcb = drives.open(name)
    except OperationFailure as e:
        LOGGER.debug('{}: open failed: {}'.format(name, e))
        console.write_err('File: ' + name + ' not found\n')
        return NOT_FOUND

    console.check_abort()
    drives.close(fcb)
    LOGGER.debug('{}: {!r}'.format(name, fcb))

    if fcb.is_read_only() and not options.force:
        console.write_err('File: ' + name + ' is R/O\n')
        return READ_ONLY

    if options.interactive:
        console.write('File: ' + name + ' , delete (y/n)? ')
        if get_reply(console, reply_max).lower() != 'y':
            console.write(ctrl.LF)
            return DECLINED
        console.write(ctrl.HT * 5 + ctrl.CR)

    try:
        if fcb.is_read_only() and options.force:
            fcb.set_read_only(False)
            drives.set_attributes(fcb)
            LOGGER.info('{}: R/O attribute cleared'.format(name))
        deleted = drives.delete(name)
    except OperationFailure as e:
        LOGGER.info('{}: {}'.format(name, e))
        deleted = False

    if not deleted:
        console.write_err('File: ' + name + ' not deleted\n')
        return FAILED

    if not options.quiet:
        console.write('File: ' + name + ' deleted\n')
    return DELETED


def main(args, env=None):
    if env is None:
        env = CpmEnvironment()
    console = env.console

    try:
        options = parse_args(args)
    except UsageError as e:
        console.write_err(str(e))
        usage(console)
        sys.exit(POSTERROR)

    LOGGER.debug('options: {!r}'.format(options))

    try:
        for name in options.filenames:
            outcome = rm(name, options, env.drives, console, reply_max=env.reply_max)
            LOGGER.debug('{}: {}'.format(name, outcome))
    except (AbortRequested, KeyboardInterrupt):
        console.write_err('^C\n')
        sys.exit(EXIT_ABORT)
    except Exception as err:
        if env.py_traceback:
            LOGGER.exception('rm failed')
        console.write_err('rm: {}: {!s}\n'.format(type(err).__name__, err))
        sys.exit(EXIT_ABORT)

    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main(sys.argv[1:])
