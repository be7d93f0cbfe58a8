"""
Guest registry API routes
"""

from typing import Optional
from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from app.schemas.guest import GuestCreate, GuestUpdate
from app.services.guest_service import GuestService
from app.utils.responses import success_response

router = APIRouter()

def get_guest_service(request: Request) -> GuestService:
    """Guest service owned by the running application"""
    return request.app.state.guest_service

@router.post("")
async def create_guest(
    guest_data: Optional[GuestCreate] = None,
    service: GuestService = Depends(get_guest_service)
):
    """Register a guest and return their QR code and invitation link"""
    name = guest_data.name if guest_data else None
    guest = await run_in_threadpool(service.create_guest, name)

    return success_response(data=guest.model_dump(by_alias=True))

@router.get("/{unique_id}")
async def get_guest(
    unique_id: str,
    service: GuestService = Depends(get_guest_service)
):
    """Get a guest for the invitation page"""
    guest = await run_in_threadpool(service.get_guest, unique_id)

    return success_response(data=guest.model_dump(by_alias=True))

@router.get("")
async def list_guests(service: GuestService = Depends(get_guest_service)):
    """List all guests, newest first"""
    guests = await run_in_threadpool(service.list_guests)

    return success_response(data=[guest.model_dump(mode="json") for guest in guests])

@router.put("/{unique_id}")
async def update_guest(
    unique_id: str,
    guest_update: Optional[GuestUpdate] = None,
    service: GuestService = Depends(get_guest_service)
):
    """Rename a guest"""
    name = guest_update.name if guest_update else None
    await run_in_threadpool(service.update_guest_name, unique_id, name)

    return success_response(message="Guest updated successfully")

@router.delete("/{unique_id}")
async def delete_guest(
    unique_id: str,
    service: GuestService = Depends(get_guest_service)
):
    """Delete a guest"""
    await run_in_threadpool(service.delete_guest, unique_id)

    return success_response(message="Guest deleted successfully")
