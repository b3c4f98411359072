from tririsk.providers.ipqs import ClientResult, EmailClient, IpClient, PhoneClient
from tririsk.providers.transport import HttpTransport, TransportResponse, UrllibTransport

__all__ = [
    "ClientResult",
    "EmailClient",
    "HttpTransport",
    "IpClient",
    "PhoneClient",
    "TransportResponse",
    "UrllibTransport",
]
