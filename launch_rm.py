# coding: utf-8
"""
Launch rm with the drives and logging taken from the configuration.

Options of the launcher are long options only; everything else is passed
on to rm unchanged.
"""
import sys
import argparse

from cpmrm.bin import rm
from cpmrm.core import CpmEnvironment


def main(argv=None):
    ap = argparse.ArgumentParser(add_help=False, allow_abbrev=False,
                                 usage='%(prog)s [launcher options] [-f] [-i] [-q] [-] filename [filename...]')
    ap.add_argument('--help', action='help',
                    help='show this help message and exit')
    ap.add_argument('--no-cfgfile', action='store_true',
                    help='do not load external config files')
    ap.add_argument('--log-level',
                    choices=['DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'],
                    default=None,
                    help='the logging level')
    ap.add_argument('--log-file',
                    help='the file to send logging messages')
    ap.add_argument('--debug', action='store_true',
                    help='log the console and drive setup')
    ns, args = ap.parse_known_args(sys.argv[1:] if argv is None else argv)

    log_setting = {}
    if ns.log_level is not None:
        log_setting['level'] = ns.log_level
    if ns.log_file is not None:
        log_setting['file'] = ns.log_file

    env = CpmEnvironment(log_setting=log_setting, no_cfgfile=ns.no_cfgfile, debug=ns.debug)
    rm.main(args, env)


if __name__ == '__main__':
    main()
