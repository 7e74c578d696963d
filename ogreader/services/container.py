from typing import Dict, Optional, Type, TypeVar
from .url_validator import URLValidator, URLValidatorInterface
from .web_fetcher import WebFetcher, WebFetcherInterface
from .reader import OpenGraphReader

T = TypeVar('T')


class ServiceContainer:
    """Container for managing service dependencies with dependency injection"""

    def __init__(self):
        self._services: Dict[Type, object] = {}
        self._register_services()

    def _register_services(self) -> None:
        """Register all services in dependency order"""
        self._services[URLValidatorInterface] = URLValidator()
        self._services[WebFetcherInterface] = WebFetcher(
            self._services[URLValidatorInterface]
        )
        self._services[OpenGraphReader] = OpenGraphReader(
            web_fetcher=self._services[WebFetcherInterface],
            url_validator=self._services[URLValidatorInterface]
        )

    def get_reader(
        self,
        ignore_specification_errors: Optional[bool] = None,
        mine_extra_information: Optional[bool] = None
    ) -> OpenGraphReader:
        """
        The shared reader, or a reader with per-request flags sharing the
        same fetcher when any flag is given
        """
        if ignore_specification_errors is None and mine_extra_information is None:
            return self._services[OpenGraphReader]  # type: ignore
        return OpenGraphReader(
            ignore_specification_errors=ignore_specification_errors,
            mine_extra_information=mine_extra_information,
            web_fetcher=self._services[WebFetcherInterface],
            url_validator=self._services[URLValidatorInterface]
        )

    def get_service(self, interface: Type[T]) -> T:
        """Generic method to retrieve a service by its interface"""
        service = self._services.get(interface)
        if service is None:
            raise ValueError(f"Service for interface {interface.__name__} not found")
        return service  # type: ignore
