# -*- coding: utf-8 -*-
"""shared fixtures for the rm tests"""
import pytest

from cpmrm.core import CpmEnvironment
from cpmrm.lib.cpmfs import DriveTable, MemoryDrive
from cpmrm.system.shconsole import ShHeadlessConsole


@pytest.fixture
def drives():
    """A: and B: as memory drives, A: is the default drive."""
    table = DriveTable(default="A")
    table.mount("A", MemoryDrive())
    table.mount("B", MemoryDrive())
    return table


@pytest.fixture
def console():
    return ShHeadlessConsole()


@pytest.fixture
def env(drives, console):
    return CpmEnvironment(no_cfgfile=True, console=console, drives=drives)
