from ._version import __version__, __version_info__
from .command_line import CommandLine, get_switch_value, has_switch
from .converters import identity, infer_type, to_bool, to_float, to_int, to_list, to_path
