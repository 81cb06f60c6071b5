from mr_mirror.core.application.ports.common.exceptions.domain_error import DomainError
from mr_mirror.core.application.ports.common.exceptions.infra_error import InfraError
from mr_mirror.core.application.ports.common.exceptions.provider_error import ProviderError

__all__ = ["DomainError", "InfraError", "ProviderError"]
