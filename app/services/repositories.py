"""
Repository layer over the guests table.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, update
from sqlalchemy.orm import Session

from app.models import Guest


class GuestRepo:
    @staticmethod
    def get_by_unique_id(db: Session, unique_id: str) -> Optional[Guest]:
        return db.query(Guest).filter(Guest.unique_id == unique_id).first()

    @staticmethod
    def list_newest_first(db: Session) -> List[Guest]:
        return db.query(Guest).order_by(Guest.created_at.desc(), Guest.id.desc()).all()

    @staticmethod
    def create(db: Session, unique_id: str, name: str, qr_code: str) -> Guest:
        guest = Guest(unique_id=unique_id, name=name, qr_code=qr_code)
        db.add(guest)
        db.commit()
        db.refresh(guest)
        return guest

    @staticmethod
    def update_name(db: Session, unique_id: str, name: str) -> int:
        """Rename a guest, returns the number of rows affected"""
        result = db.execute(
            update(Guest).where(Guest.unique_id == unique_id).values(name=name)
        )
        db.commit()
        return result.rowcount

    @staticmethod
    def delete(db: Session, unique_id: str) -> int:
        """Delete a guest, returns the number of rows affected"""
        result = db.execute(delete(Guest).where(Guest.unique_id == unique_id))
        db.commit()
        return result.rowcount
