"""Deployment endpoint."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from md2resume.api.deps import DeployerDep
from md2resume.models.deployment import DeployContentInput, ErrorClassification

router = APIRouter()

FAILURE_STATUS_CODES = {
    ErrorClassification.TOOL_NOT_INSTALLED: status.HTTP_400_BAD_REQUEST,
    ErrorClassification.SOURCE_NOT_FOUND: status.HTTP_400_BAD_REQUEST,
    ErrorClassification.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ErrorClassification.NETWORK_UNREACHABLE: status.HTTP_502_BAD_GATEWAY,
    ErrorClassification.PARSE_FAILURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorClassification.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@router.post(
    "/deploy",
    summary="Deploy a rendered résumé to IPFS",
    description="Publish HTML content through PinMe. Waits for the upload to settle before returning.",
)
async def deploy(data: DeployContentInput, deployer: DeployerDep) -> JSONResponse:
    """Deploy HTML content and return its access URLs."""
    result = await deployer.deploy_content(data)

    if result.success:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content={
                "success": True,
                "message": "Deployment succeeded",
                "result": result.model_dump(mode="json", exclude={"error"}),
            },
        )

    failure = result.error
    classification = failure.classification if failure else ErrorClassification.UNKNOWN
    return JSONResponse(
        status_code=FAILURE_STATUS_CODES[classification],
        content={
            "success": False,
            "error": failure.message if failure else "Unknown deployment error",
            "classification": classification.value,
            "install_guide": (
                failure.install_guide.model_dump(mode="json")
                if failure and failure.install_guide
                else None
            ),
            "details": failure.details if failure else {},
        },
    )
