# External package imports
import httpx

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import AnalysisProvider


class DIContainer(BaseContainer):
    """
    Main dependency injection container.

    Holds the immutable settings and the shared HTTP client, then lets the
    providers register the clients and use cases built on top of them.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient) -> None:
        super().__init__()
        self.settings = settings
        self.http_client = http_client
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: configuration → clients → use cases
        """
        self.register_singleton(Settings, self.settings)
        self.register_singleton(httpx.AsyncClient, self.http_client)

        AnalysisProvider.register(self)
