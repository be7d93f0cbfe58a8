"""
Tests for the guest registry service
"""

import pytest
from sqlalchemy import text

from app.core.config import Settings
from app.core.db import Base, Database
from app.models import Guest
from app.schemas.guest import GuestDetail, GuestRecord
from app.services import guest_service as guest_service_module
from app.services.guest_service import GuestService
from app.utils.errors import EncodingError, NotFoundError, PersistenceError, ValidationError

# Test database setup
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_guest_service.db"
test_settings = Settings(
    DATABASE_URL=SQLALCHEMY_DATABASE_URL,
    CHECKIN_BASE_URL="https://checkin.example.com",
    INVITATION_BASE_URL="https://invite.example.com",
)
database = Database(SQLALCHEMY_DATABASE_URL)

@pytest.fixture
def service():
    """Create a guest service on an empty database"""
    Base.metadata.create_all(bind=database.engine)
    try:
        yield GuestService(database, settings=test_settings)
    finally:
        Base.metadata.drop_all(bind=database.engine)

def count_rows():
    with database.session() as db:
        return db.query(Guest).count()

def test_create_guest_returns_identifier_and_token(service):
    """Test creating a guest fills every field"""
    guest = service.create_guest("Alice")

    assert guest.id > 0
    assert guest.name == "Alice"
    assert len(guest.unique_id) == 32
    int(guest.unique_id, 16)  # hex
    assert guest.qr_code.startswith("data:image/png;base64,")
    assert guest.invitation_url == f"https://invite.example.com/invitation/{guest.unique_id}"

def test_create_guest_persists_row(service):
    """Test the created guest can be fetched back"""
    created = service.create_guest("Alice")

    fetched = service.get_guest(created.unique_id)
    assert fetched.name == "Alice"
    assert fetched.unique_id == created.unique_id
    assert fetched.qr_code == created.qr_code

def test_same_name_creates_distinct_guests(service):
    """Test duplicate names still produce two rows"""
    first = service.create_guest("Bob")
    second = service.create_guest("Bob")

    assert first.unique_id != second.unique_id
    assert first.id != second.id
    assert count_rows() == 2

@pytest.mark.parametrize("name", [None, ""])
def test_create_guest_requires_name(service, name):
    """Test missing names are rejected before anything is stored"""
    with pytest.raises(ValidationError) as exc_info:
        service.create_guest(name)

    assert exc_info.value.message == "Name is required"
    assert count_rows() == 0

def test_whitespace_name_is_stored_as_given(service):
    """Test only presence is checked, the name is not trimmed"""
    created = service.create_guest("   ")

    assert created.name == "   "
    assert service.get_guest(created.unique_id).name == "   "

    service.update_guest_name(created.unique_id, " Alice ")
    assert service.get_guest(created.unique_id).name == " Alice "

def test_get_unknown_guest(service):
    """Test fetching an identifier that was never issued"""
    service.create_guest("Alice")

    with pytest.raises(NotFoundError):
        service.get_guest("does-not-exist")

def test_list_guests_newest_first(service):
    """Test listing returns every field, most recent guest first"""
    names = ["Alice", "Bob", "Carol"]
    for name in names:
        service.create_guest(name)

    guests = service.list_guests()

    assert [guest.name for guest in guests] == list(reversed(names))
    assert guests[0].id > guests[1].id > guests[2].id
    assert guests[0].created_at >= guests[-1].created_at
    assert all(guest.qr_code.startswith("data:image/png;base64,") for guest in guests)

def test_list_guests_empty(service):
    assert service.list_guests() == []

def test_update_guest_name_keeps_qr_code(service):
    """Test renaming leaves the check-in token untouched"""
    created = service.create_guest("Alice")

    service.update_guest_name(created.unique_id, "Alicia")

    fetched = service.get_guest(created.unique_id)
    assert fetched.name == "Alicia"
    assert fetched.qr_code == created.qr_code

def test_update_guest_requires_name(service):
    created = service.create_guest("Alice")

    with pytest.raises(ValidationError):
        service.update_guest_name(created.unique_id, "")

    assert service.get_guest(created.unique_id).name == "Alice"

def test_update_unknown_guest(service):
    with pytest.raises(NotFoundError):
        service.update_guest_name("does-not-exist", "Alicia")

def test_delete_guest(service):
    """Test deleting removes the row and a second delete fails the same way"""
    created = service.create_guest("Alice")

    service.delete_guest(created.unique_id)

    with pytest.raises(NotFoundError):
        service.get_guest(created.unique_id)
    with pytest.raises(NotFoundError):
        service.delete_guest(created.unique_id)
    assert count_rows() == 0

def test_creates_and_deletes_leave_remaining_rows(service):
    """Test N creates and M deletes leave N - M guests"""
    created = [service.create_guest(f"Guest {i}") for i in range(5)]

    for guest in created[1:3]:
        service.delete_guest(guest.unique_id)

    remaining = service.list_guests()
    assert [guest.unique_id for guest in remaining] == [
        created[4].unique_id,
        created[3].unique_id,
        created[0].unique_id,
    ]

def test_identifier_collision_is_retried(service, monkeypatch):
    """Test a colliding identifier is replaced with a fresh one"""
    existing = service.create_guest("Alice")

    ids = iter([existing.unique_id, "f" * 32])
    monkeypatch.setattr(guest_service_module, "generate_unique_id", lambda: next(ids))

    guest = service.create_guest("Bob")

    assert guest.unique_id == "f" * 32
    assert count_rows() == 2

def test_identifier_collision_gives_up(service, monkeypatch):
    """Test repeated collisions surface as a persistence error"""
    existing = service.create_guest("Alice")
    monkeypatch.setattr(guest_service_module, "generate_unique_id", lambda: existing.unique_id)

    with pytest.raises(PersistenceError) as exc_info:
        service.create_guest("Bob")

    assert exc_info.value.message == "Failed to create guest"
    assert count_rows() == 1

def test_encoding_failure_writes_nothing(service, monkeypatch):
    """Test a QR failure aborts the create"""
    def broken_png(data, format='PNG'):
        raise RuntimeError("encoder exploded")

    monkeypatch.setattr(service.qr_service, "generate_png", broken_png)

    with pytest.raises(EncodingError):
        service.create_guest("Alice")

    assert count_rows() == 0

def test_storage_failure_is_reported(service):
    """Test storage errors are wrapped as persistence errors"""
    with database.session() as db:
        db.execute(text("DROP TABLE guests"))
        db.commit()

    with pytest.raises(PersistenceError) as exc_info:
        service.list_guests()
    assert exc_info.value.message == "Failed to fetch guests"

    with pytest.raises(PersistenceError):
        service.create_guest("Alice")
    with pytest.raises(PersistenceError):
        service.delete_guest("abc")

def test_persistence_error_defaults():
    """Test a bare persistence error reports a generic server error"""
    error = PersistenceError()

    assert error.status_code == 500
    assert error.message == "Internal server error"

def test_schema_and_settings_config():
    """Test ORM rows validate into schemas and settings read .env"""
    assert GuestDetail.model_config["from_attributes"] is True
    assert GuestRecord.model_config["from_attributes"] is True
    assert Settings.model_config["env_file"] == ".env"
