# coding: utf-8
import logging
import sys
from collections import deque

import pyte
from pyte import modes as mo

from .shcommon import AbortRequested, Control as ctrl


class ShConsole(object):
    """
    The console the commands talk to: output and error streams, edited line
    input and the abort poll. This one is backed by ordinary file-like
    streams, the real standard streams by default.
    """

    def __init__(self, ins=None, outs=None, errs=None, debug=False):
        self.ins = ins if ins is not None else sys.stdin
        self.outs = outs if outs is not None else sys.stdout
        self.errs = errs if errs is not None else sys.stderr
        self.debug = debug
        self.logger = logging.getLogger('cpmrm.console')

    def write(self, s):
        self.outs.write(s)
        self.outs.flush()

    def write_err(self, s):
        self.errs.write(s)
        self.errs.flush()

    def _readline(self):
        return self.ins.readline()

    def read_line(self, max_length):
        """
        Read one line of edited input.
        :param max_length: the maximum number of characters kept
        :type max_length: int
        :return: a tuple of the number of characters read and the text
        :rtype: (int, str)
        """
        line = self._readline()
        if ctrl.ETX in line:
            raise AbortRequested()
        text = line.rstrip(ctrl.LF).rstrip(ctrl.CR)[:max_length]
        if self.debug:
            self.logger.debug('read_line: {!r}'.format(text))
        return len(text), text

    def check_abort(self):
        """
        Poll for a pending abort request and raise AbortRequested if there
        is one. On a real terminal Ctrl-C arrives as KeyboardInterrupt, so
        there is nothing to poll here.
        """
        pass


class ShHeadlessConsole(ShConsole):
    """
    A console without a terminal. Input is queued up front, output is
    captured per stream and rendered on a pyte screen the way a terminal
    would show it.
    """

    def __init__(self, input_text='', columns=80, lines=24, debug=False):
        super(ShHeadlessConsole, self).__init__(debug=debug)
        # The input buffer, push to the right end, read from the left end
        self._buffer = deque(input_text)
        self._out = []
        self._err = []
        self.screen = pyte.Screen(columns, lines)
        self.screen.set_mode(mo.LNM)
        self.stream = pyte.Stream(self.screen)

    def push(self, s):
        self._buffer.extend(s)

    def write(self, s):
        self._out.append(s)
        self.stream.feed(s)

    def write_err(self, s):
        self._err.append(s)
        self.stream.feed(s)

    def _readline(self):
        ret = []
        while self._buffer:
            c = self._buffer.popleft()
            if c in (ctrl.LF, ctrl.CR):
                break
            ret.append(c)
        line = ''.join(ret)
        # echo the typed line, the cursor returns to the left margin only
        self.stream.feed(line.replace(ctrl.ETX, '^C') + ctrl.CR)
        return line

    def check_abort(self):
        if self._buffer and self._buffer[0] == ctrl.ETX:
            self._buffer.popleft()
            raise AbortRequested()

    @property
    def stdout_text(self):
        return ''.join(self._out)

    @property
    def stderr_text(self):
        return ''.join(self._err)

    @property
    def screen_text(self):
        """the rendered screen with trailing blank lines and spaces removed."""
        return '\n'.join(line.rstrip() for line in self.screen.display).rstrip('\n')
