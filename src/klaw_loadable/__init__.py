"""klaw-loadable: re-fetchable data that keeps stale content while refreshing.

Flat imports (preferred):
    from klaw_loadable import Loadable, not_asked, loading, succeed, fail
    from klaw_loadable import Empty, Failed, Succeeded
    from klaw_loadable import combine_map, combine_map_with

Submodule imports (for organization):
    from klaw_loadable.loadable import Loadable, from_result
    from klaw_loadable.value import Empty, Failed, Succeeded, Value
    from klaw_loadable.result import Ok, Err
    from klaw_loadable.option import Some, Nothing
    from klaw_loadable import keyed
"""

# Keyed-collection helpers
from klaw_loadable import keyed

# Configuration
from klaw_loadable._config import LoadableConfig, get_config, init
from klaw_loadable._logging import configure_logging, get_logger

# Loadable
from klaw_loadable.loadable import (
    Loadable,
    Unwrapped,
    combine,
    combine_map,
    combine_map_with,
    combine_with,
    fail,
    from_maybe,
    from_result,
    loading,
    map2,
    not_asked,
    succeed,
)

# Option types
from klaw_loadable.option import Nothing, NothingType, Option, Some

# Result types
from klaw_loadable.result import Err, Ok, Result

# Content variants
from klaw_loadable.value import Empty, Failed, Succeeded, Value

__all__ = [
    'Empty',
    'Err',
    'Failed',
    'Loadable',
    'LoadableConfig',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'Some',
    'Succeeded',
    'Unwrapped',
    'Value',
    'combine',
    'combine_map',
    'combine_map_with',
    'combine_with',
    'configure_logging',
    'fail',
    'from_maybe',
    'from_result',
    'get_config',
    'get_logger',
    'init',
    'keyed',
    'loading',
    'map2',
    'not_asked',
    'succeed',
]
