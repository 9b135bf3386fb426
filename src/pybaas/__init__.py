"""pybaas - Async Python client for the BaaS platform API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pybaas")
except PackageNotFoundError:
    __version__ = "0+local"
from pybaas._crypto.signing import compute_auth_code
from pybaas._trace import LoggingSink, TraceSink, null_sink
from pybaas.client import BaasClient
from pybaas.config import BaasConfig
from pybaas.exceptions import (
    TRANSPORT_ERRORS,
    BaasAuthenticationError,
    BaasConfigError,
    BaasError,
    BaasHttpError,
    BaasMissingParameterError,
    BaasOperationNotFoundError,
)
from pybaas.models import (
    ApiRequest,
    ApiResponse,
    Operation,
    OperationParam,
    OutcomeKind,
    ParamLocation,
)
from pybaas.session import Session

__all__ = [
    "__version__",
    "TRANSPORT_ERRORS",
    "ApiRequest",
    "ApiResponse",
    "BaasAuthenticationError",
    "BaasClient",
    "BaasConfig",
    "BaasConfigError",
    "BaasError",
    "BaasHttpError",
    "BaasMissingParameterError",
    "BaasOperationNotFoundError",
    "LoggingSink",
    "Operation",
    "OperationParam",
    "OutcomeKind",
    "ParamLocation",
    "Session",
    "TraceSink",
    "compute_auth_code",
    "null_sink",
]
