"""FullContact API access package.

Module split:
    - `config`: environment-driven endpoint, credential and network settings.
    - `transport`: generic GET/POST/DELETE dispatcher with JSON decoding.
    - `contact`: contact-list operations built on the transport.
    - `types`: shared filter values and query-value serialization.
"""

from fullcontact.client.config import ClientConfig
from fullcontact.client.contact import ContactClient
from fullcontact.client.transport import Transport
from fullcontact.client.types import ActionType

__all__ = ["ActionType", "ClientConfig", "ContactClient", "Transport"]
