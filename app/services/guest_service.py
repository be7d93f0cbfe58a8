"""
Guest registry service
"""

import logging
import secrets
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.config import Settings, settings as default_settings
from app.core.db import Database
from app.schemas.guest import GuestCreated, GuestDetail, GuestRecord
from app.services.qr_service import QRService
from app.services.repositories import GuestRepo
from app.utils.errors import NotFoundError, PersistenceError, ValidationError

logger = logging.getLogger(__name__)

def generate_unique_id() -> str:
    """128 random bits, hex encoded"""
    return secrets.token_hex(16)

def require_name(name: Optional[str]) -> str:
    if not name:
        raise ValidationError("Name is required")
    return name

class GuestService:
    """Create, read, rename and delete guests.

    Every method performs blocking I/O and is meant to be called from a
    worker thread. Each call uses its own session.
    """

    def __init__(
        self,
        database: Database,
        qr_service: Optional[QRService] = None,
        settings: Settings = default_settings,
    ):
        self.database = database
        self.qr_service = qr_service or QRService(settings)
        self.settings = settings

    def create_guest(self, name: Optional[str]) -> GuestCreated:
        """Register a guest and mint their identifier and check-in QR code"""
        name = require_name(name)

        attempts = max(1, self.settings.UNIQUE_ID_MAX_ATTEMPTS)
        for attempt in range(1, attempts + 1):
            unique_id = generate_unique_id()
            qr_code = self.qr_service.generate_checkin_qr(unique_id)

            try:
                with self.database.session() as db:
                    guest = GuestRepo.create(db, unique_id=unique_id, name=name, qr_code=qr_code)
                    result = GuestCreated(
                        id=guest.id,
                        unique_id=guest.unique_id,
                        name=guest.name,
                        qr_code=guest.qr_code,
                        invitation_url=self.qr_service.get_invitation_url(guest.unique_id),
                    )
            except IntegrityError as e:
                logger.warning(f"Identifier collision on attempt {attempt}/{attempts}: {e.orig}")
                continue
            except SQLAlchemyError as e:
                logger.exception("Error inserting guest")
                raise PersistenceError("Failed to create guest") from e

            logger.info(f"Guest created: {result.unique_id}")
            return result

        logger.error(f"Could not allocate a unique identifier after {attempts} attempts")
        raise PersistenceError("Failed to create guest")

    def get_guest(self, unique_id: str) -> GuestDetail:
        """Look up one guest by identifier"""
        try:
            with self.database.session() as db:
                guest = GuestRepo.get_by_unique_id(db, unique_id)
                if guest is None:
                    raise NotFoundError("Guest not found")
                return GuestDetail.model_validate(guest)
        except SQLAlchemyError as e:
            logger.exception("Error fetching guest")
            raise PersistenceError("Failed to fetch guest") from e

    def list_guests(self) -> List[GuestRecord]:
        """All guests, most recently created first"""
        try:
            with self.database.session() as db:
                guests = GuestRepo.list_newest_first(db)
                return [GuestRecord.model_validate(guest) for guest in guests]
        except SQLAlchemyError as e:
            logger.exception("Error fetching guests")
            raise PersistenceError("Failed to fetch guests") from e

    def update_guest_name(self, unique_id: str, name: Optional[str]) -> None:
        """Rename a guest; the QR code is left as generated"""
        name = require_name(name)

        try:
            with self.database.session() as db:
                changes = GuestRepo.update_name(db, unique_id, name)
        except SQLAlchemyError as e:
            logger.exception("Error updating guest")
            raise PersistenceError("Failed to update guest") from e

        if changes == 0:
            raise NotFoundError("Guest not found")
        logger.info(f"Guest updated: {unique_id}")

    def delete_guest(self, unique_id: str) -> None:
        try:
            with self.database.session() as db:
                changes = GuestRepo.delete(db, unique_id)
        except SQLAlchemyError as e:
            logger.exception("Error deleting guest")
            raise PersistenceError("Failed to delete guest") from e

        if changes == 0:
            raise NotFoundError("Guest not found")
        logger.info(f"Guest deleted: {unique_id}")
