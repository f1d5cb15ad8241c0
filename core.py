# coding: utf-8
"""
rm for the CP/M disk environment

Deletes files from CP/M style drives in the manner of the Unix rm command.
"""

__version__ = '1.04'

import logging
import logging.handlers
import os
from configparser import ConfigParser
from io import StringIO

from .lib.cpmfs import DRIVE_TYPES, DriveTable, LocalDrive
from .system.shcommon import _RM_CONFIG_FILES, _RM_ROOT, _RM_USER_CONFIG_FILE, _SYS_STDERR
from .system.shconsole import ShConsole

# Setup logging
LOGGER = logging.getLogger('cpmrm')

# Default configuration (can be overridden by external configuration file)
_DEFAULT_CONFIG = """[system]
py_traceback=0
reply_max=6

[drives]
default=A
A=.

[logging]
level=WARNING
file=
"""


class CpmEnvironment(object):
    """
    Main application class. It loads the configuration, sets up logging and
    wires the drives and the console the commands run against.
    """

    def __init__(self, log_setting=None, no_cfgfile=False, console=None, drives=None, debug=False):
        self.__version__ = __version__

        self.config = self._load_config(no_cfgfile=no_cfgfile)
        self.logger = self._config_logging(self.config, log_setting)

        self.py_traceback = self.config.getboolean('system', 'py_traceback')
        self.reply_max = self.config.getint('system', 'reply_max')

        self.console = console if console is not None else ShConsole(debug=debug)
        self.drives = drives if drives is not None else self._load_drives(self.config)

        if debug:
            self.logger.debug('drives: {}'.format(
                ', '.join('{}:={}'.format(k, v.repr()) for k, v in sorted(self.drives.letter2drive.items()))))

    @staticmethod
    def _load_config(no_cfgfile=False):
        config = ConfigParser()
        config.optionxform = str  # make it preserve case

        # defaults
        config.read_file(StringIO(_DEFAULT_CONFIG))

        # update from config file
        if not no_cfgfile:
            config.read([os.path.join(_RM_ROOT, f) for f in _RM_CONFIG_FILES] + [_RM_USER_CONFIG_FILE])

        return config

    @staticmethod
    def _config_logging(config, log_setting=None):

        logger = logging.getLogger('cpmrm')

        _log_setting = {
            'level': config.get('logging', 'level'),
            'file': config.get('logging', 'file') or None,
        }

        _log_setting.update(log_setting or {})

        level = {
            'CRITICAL': logging.CRITICAL,
            'ERROR': logging.ERROR,
            'WARNING': logging.WARNING,
            'WARN': logging.WARNING,
            'INFO': logging.INFO,
            'DEBUG': logging.DEBUG,
            'NOTSET': logging.NOTSET,
        }.get(str(_log_setting['level']).upper(),
              logging.WARNING)

        logger.setLevel(level)

        if not logger.handlers:
            if _log_setting['file']:
                _log_handler = logging.handlers.RotatingFileHandler(_log_setting['file'], mode='w')
            else:
                _log_handler = logging.StreamHandler(_SYS_STDERR)
            _log_handler.setLevel(level)
            _log_handler.setFormatter(
                logging.Formatter(
                    '[%(asctime)s] [%(levelname)s] [%(name)s] [%(funcName)s] [%(lineno)d] - %(message)s'
                )
            )
            logger.addHandler(_log_handler)

        return logger

    @staticmethod
    def _load_drives(config):
        """
        Mount the drives of the [drives] section. A value is either a
        directory or 'type:argument' with a type from DRIVE_TYPES.
        """
        drives = DriveTable(default=config.get('drives', 'default'))
        for key, value in config.items('drives'):
            if key == 'default':
                continue
            dtype, sep, arg = value.partition(':')
            if sep and dtype in DRIVE_TYPES:
                drive_class = DRIVE_TYPES[dtype]
            elif value in DRIVE_TYPES:
                drive_class, arg = DRIVE_TYPES[value], ''
            else:
                drive_class, arg = LocalDrive, value
            if drive_class is LocalDrive:
                drive = LocalDrive(os.path.expanduser(arg or '.'))
            else:
                drive = drive_class()
            drives.mount(key, drive)
        return drives
