# xyz2sgf/common - configuration shared by the command line tools
#
# Nothing here is needed by the conversion core.

from xyz2sgf.common.typed_config import ConvertConfig, load_convert_config

__all__ = ["ConvertConfig", "load_convert_config"]
