"""PinMe CLI availability endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from md2resume.api.deps import DeployerDep
from md2resume.config import load_settings
from md2resume.models.deployment import DeploymentMode, InstallGuide

router = APIRouter()


class PinMeStatusResponse(BaseModel):
    """Whether deployments can currently reach PinMe."""

    installed: bool
    mode: DeploymentMode
    message: str
    install_guide: InstallGuide | None = None


@router.get(
    "/pinme-status",
    response_model=PinMeStatusResponse,
    summary="Check PinMe CLI availability",
)
async def pinme_status(deployer: DeployerDep) -> PinMeStatusResponse:
    """Probe the PinMe CLI (always available in mock mode)."""
    mode = load_settings().deployment_mode
    installed = await deployer.probe()

    if installed:
        message = "PinMe CLI is installed"
        if mode == DeploymentMode.MOCK:
            message = "Mock mode enabled, deployments are simulated"
        return PinMeStatusResponse(installed=True, mode=mode, message=message)

    return PinMeStatusResponse(
        installed=False,
        mode=mode,
        message="PinMe CLI is not installed",
        install_guide=InstallGuide(),
    )
