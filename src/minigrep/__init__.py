"""Line-oriented regex search with capture-group dumping."""

from .errors import ArgumentError as ArgumentError
from .errors import FileOpenError as FileOpenError
from .errors import LineDecodeError as LineDecodeError
from .errors import MinigrepError as MinigrepError
from .errors import PatternCompileError as PatternCompileError
from .formatter import capture_set as capture_set
from .formatter import emit as emit
from .formatter import format_capture_groups as format_capture_groups
from .formatter import should_emit as should_emit
from .matcher import compile_pattern as compile_pattern
from .matcher import is_match as is_match
from .options import Options as Options
from .output import print_plain as print_plain
from .search import run as run
from .source import open_lines as open_lines
from .utils import fatal as fatal
