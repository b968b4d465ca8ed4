"""
Notifications API router for parsing and triaging bank app notifications.
"""

from fastapi import APIRouter
from pydantic import BaseModel
import logging

from bankparse.models.bank_app import (
    BankAppConfig,
    DEFAULT_BANK_APPS,
    get_display_name,
    is_supported_package,
)
from bankparse.models.notification import CaptureDecision, ParsedNotification, RawNotification
from bankparse.services.capture import CaptureService
from bankparse.services.parser import NotificationParser

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)

parser = NotificationParser()


class SupportedPackageResponse(BaseModel):
    """Response model for a single package lookup."""
    package_name: str
    supported: bool
    display_name: str


@router.post("/parse", response_model=ParsedNotification)
async def parse_notification(notification: RawNotification):
    """
    Parse a notification without capturing it.

    Args:
        notification: Package name, title and body of the notification

    Returns:
        Parsed transaction fields with confidence
    """
    return parser.parse_notification(notification)


@router.post("/capture", response_model=CaptureDecision)
async def capture_notification(notification: RawNotification):
    """
    Triage a notification: parse it and decide whether it should be stored
    for review. Storage itself happens downstream.
    """
    decision = CaptureService(parser=parser).triage(notification)
    logger.debug("Capture request handled", extra={
        "package_name": notification.package_name,
        "captured": decision.captured,
        "reason": decision.reason
    })
    return decision


@router.get("/supported-apps", response_model=list[BankAppConfig])
async def list_supported_apps():
    """List the bank apps with notification support."""
    return list(DEFAULT_BANK_APPS)


@router.get("/supported-apps/{package_name}", response_model=SupportedPackageResponse)
async def get_supported_app(package_name: str):
    return SupportedPackageResponse(
        package_name=package_name,
        supported=is_supported_package(package_name),
        display_name=get_display_name(package_name),
    )
