import logging

from .deferred import Deferred as Deferred
from .deferred import is_deferred as is_deferred
from .outcome import Err as Err
from .outcome import Ok as Ok
from .outcome import Outcome as Outcome
from .outcome import Result as Result
from .outcome import is_failure as is_failure
from .outcome import tag as tag
from .outcome import untag as untag
from .wrap import try_wrap as try_wrap

# Stay silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
