import logging

from . import messages
from . errors import CueError, DecodeError, FlacError
from . position import Position
from . model import Sheet, FileEntry, TrackEntry, IndexEntry
from . model import Message, WarningMessage, ErrorMessage
from . parser import parse
from . reader import read, read_stream, loads

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
