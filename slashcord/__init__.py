"""
Discord Slash Command Options
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Value objects and builders describing the options of Discord slash commands.

:copyright: (c) 2015-present Rapptz
:license: MIT, see LICENSE for more details.

"""

__title__ = 'slashcord'
__author__ = 'Rapptz'
__license__ = 'MIT'
__copyright__ = 'Copyright 2015-present Rapptz'
__version__ = '1.0.0'

import logging
from typing import NamedTuple, Literal

from .enums import *
from .errors import *
from .choice import *
from .option import *
from .builder import *
from .command import *
from . import utils as utils
from .utils import setup_logging as setup_logging


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: Literal['alpha', 'beta', 'candidate', 'final']
    serial: int


version_info: VersionInfo = VersionInfo(major=1, minor=0, micro=0, releaselevel='final', serial=0)

logging.getLogger(__name__).addHandler(logging.NullHandler())

del logging, NamedTuple, Literal, VersionInfo
