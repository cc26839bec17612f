"""
ftxapi — synchronous client for the FTX REST API.

Submodules
----------
client          ``FTXClient``: one typed method per exchange endpoint.
endpoints       Declarative endpoint table (method, path, auth, decoder).
request         Immutable request descriptors and query/payload encoding.
builder         Turns descriptors into signed ``requests`` requests.
signer          HMAC-SHA256 signing.
dispatcher      Sends requests and classifies responses into errors.
errors          Exception hierarchy.
models          Result and argument shapes.
config          ``ClientConfig`` and session factory.
orders          Order-placement helpers used by the CLI.
validators      Input validation for CLI parameters.
logging_config  Dual-output logging (console + rotating file).
"""

from ftxapi.client import FTXClient, unwrap_envelope
from ftxapi.config import DEFAULT_BASE_URL, ClientConfig
from ftxapi.errors import (
    APIError,
    BodyReadError,
    ConstructionError,
    DecodeError,
    EnvelopeError,
    FTXError,
    OrderAlreadyClosed,
    OrderAlreadyQueued,
    RateLimited,
    TransportError,
    UnexpectedStatus,
)
from ftxapi.request import Method, Request
from ftxapi.signer import sign

__version__ = "1.0.0"

__all__ = [
    "FTXClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "Method",
    "Request",
    "sign",
    "unwrap_envelope",
    "FTXError",
    "ConstructionError",
    "TransportError",
    "RateLimited",
    "BodyReadError",
    "UnexpectedStatus",
    "APIError",
    "OrderAlreadyClosed",
    "OrderAlreadyQueued",
    "EnvelopeError",
    "DecodeError",
]
