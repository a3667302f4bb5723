"""Services for MD2Resume."""

from md2resume.services.deployer import DeploymentService, get_deployment_service

__all__ = [
    "DeploymentService",
    "get_deployment_service",
]
