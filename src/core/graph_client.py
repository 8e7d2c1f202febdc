"""
MS Graph client setup with lazy initialization.

Uses app-only (client credentials) auth; the app registration needs the
Calendars.ReadWrite application permission with admin consent.
"""

from azure.identity import ClientSecretCredential
from msgraph import GraphServiceClient

from core import config

GRAPH_SCOPES = ["https://graph.microsoft.com/.default"]

_graph_client: GraphServiceClient | None = None


class GraphConfigurationError(Exception):
    """Raised when the Graph app credentials are not configured."""


def missing_credentials() -> list[str]:
    """Names of the Graph environment variables that are empty."""
    settings = {
        "MICROSOFT_GRAPH_TENANT_ID": config.GRAPH_TENANT_ID,
        "MICROSOFT_GRAPH_APP_ID": config.GRAPH_APP_ID,
        "MICROSOFT_GRAPH_CLIENT_SECRET": config.GRAPH_CLIENT_SECRET,
    }
    return [name for name, value in settings.items() if not value]


def get_graph_client() -> GraphServiceClient:
    """Get or create the MS Graph client (lazy initialization)."""
    global _graph_client
    if _graph_client is None:
        missing = missing_credentials()
        if missing:
            raise GraphConfigurationError(f"Missing Graph settings: {', '.join(missing)}")

        credential = ClientSecretCredential(
            tenant_id=config.GRAPH_TENANT_ID,
            client_id=config.GRAPH_APP_ID,
            client_secret=config.GRAPH_CLIENT_SECRET,
        )
        _graph_client = GraphServiceClient(credentials=credential, scopes=GRAPH_SCOPES)
    return _graph_client
