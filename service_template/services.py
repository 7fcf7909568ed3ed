"""The services built from the template."""

from .api import ServiceConfig

TEMPLATE_1 = ServiceConfig(
    name="service-template-1",
    greeting="Service Template 1 - Ready for customization 🚀",
    description="Service template with a health check, ready for customization.",
    port=8080,
)

BACKEND = ServiceConfig(
    name="backend-service",
    greeting="Welcome to the backend service 🚀",
    description="Backend service template with health and info endpoints.",
    health_service="backend",
    info_name="backend-service",
    port=8081,
)

SERVICES: dict[str, ServiceConfig] = {
    "template-1": TEMPLATE_1,
    "backend": BACKEND,
}


class UnknownServiceError(KeyError):
    """Raised when a service name has no preset."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown service '{self.name}'. Known services: {', '.join(sorted(SERVICES))}"


def get_service(name: str) -> ServiceConfig:
    """Look up a service preset by name."""
    try:
        return SERVICES[name]
    except KeyError:
        raise UnknownServiceError(name) from None
