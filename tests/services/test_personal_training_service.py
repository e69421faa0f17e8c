"""
Tests del planificador de entrenamiento personal: validaciones,
solapamientos, precio y actualizaciones parciales.
"""

from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock, patch

import pytest
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, InvalidStateError, ConflictError, InvalidInputError
from app.models.personal_training import SessionStatus
from app.repositories.trainer import trainer_repository
from app.schemas.personal_training import PersonalTrainingUpdate
from app.services.personal_training import (
    PersonalTrainingService, calculate_session_price, intervals_overlap
)

SESSION_DAY = datetime(2025, 6, 10)


@pytest.fixture
def service(fixed_clock):
    return PersonalTrainingService(clock=fixed_clock)


def book(service, db, user, trainer, start, end, day=SESSION_DAY, notes=None):
    return service.book_personal_training(
        db, user_id=user.id, trainer_id=trainer.id, session_date=day,
        start_time=start, end_time=end, notes=notes
    )


def test_calculate_session_price():
    assert calculate_session_price(Decimal("75.00"), 90) == Decimal("112.50")
    assert calculate_session_price(Decimal("50.00"), 60) == Decimal("50.00")
    # 40 * 25 / 60 = 16.6666... -> 16.67
    assert calculate_session_price(Decimal("40.00"), 25) == Decimal("16.67")


def test_intervals_overlap_is_half_open():
    assert intervals_overlap(600, 660, 570, 630)
    assert not intervals_overlap(600, 660, 660, 720)
    assert not intervals_overlap(600, 660, 540, 600)


class TestBookPersonalTraining:

    def test_books_with_prorated_price(self, db, service, fixed_clock, user, trainer):
        session = book(service, db, user, trainer, "09:00", "10:30", notes="Técnica de sentadilla")

        assert session.status == SessionStatus.SCHEDULED
        assert session.price == Decimal("112.50")
        assert session.notes == "Técnica de sentadilla"
        assert session.created_at == fixed_clock()
        assert session.updated_at == fixed_clock()

    def test_overlap_conflicts(self, db, service, user, other_user, trainer):
        book(service, db, user, trainer, "09:30", "10:30")

        with pytest.raises(ConflictError):
            book(service, db, other_user, trainer, "10:00", "11:00")

    def test_back_to_back_sessions_allowed(self, db, service, user, other_user, trainer):
        book(service, db, user, trainer, "09:00", "10:00")
        second = book(service, db, other_user, trainer, "10:00", "11:00")
        assert second.id is not None

    def test_other_day_does_not_conflict(self, db, service, user, trainer):
        book(service, db, user, trainer, "09:00", "10:00")
        next_day = book(service, db, user, trainer, "09:00", "10:00", day=datetime(2025, 6, 11))
        assert next_day.id is not None

    def test_other_trainer_does_not_conflict(self, db, service, user, trainer, trainer_factory):
        second_trainer = trainer_factory(email="second@gym.io", hourly_rate="60.00")
        book(service, db, user, trainer, "09:00", "10:00")
        session = book(service, db, user, second_trainer, "09:00", "10:00")
        assert session.price == Decimal("60.00")

    def test_cancelled_session_frees_the_slot(self, db, service, user, trainer):
        first = book(service, db, user, trainer, "09:00", "10:00")
        service.update_personal_training(
            db, session_id=first.id, user_id=user.id,
            update_in=PersonalTrainingUpdate(user_id=user.id, status=SessionStatus.CANCELLED)
        )

        again = book(service, db, user, trainer, "09:00", "10:00")
        assert again.status == SessionStatus.SCHEDULED

    @pytest.mark.parametrize("start,end", [("10:00", "10:00"), ("11:00", "10:00")])
    def test_end_not_after_start(self, db, service, user, trainer, start, end):
        with pytest.raises(InvalidInputError):
            book(service, db, user, trainer, start, end)

    def test_unknown_user(self, db, service, trainer):
        with pytest.raises(NotFoundError):
            service.book_personal_training(
                db, user_id=999, trainer_id=trainer.id, session_date=SESSION_DAY,
                start_time="09:00", end_time="10:00"
            )

    def test_unknown_trainer(self, db, service, user):
        with pytest.raises(NotFoundError):
            service.book_personal_training(
                db, user_id=user.id, trainer_id=999, session_date=SESSION_DAY,
                start_time="09:00", end_time="10:00"
            )

    def test_unavailable_trainer(self, db, service, user, unavailable_trainer):
        with pytest.raises(InvalidStateError):
            book(service, db, user, unavailable_trainer, "09:00", "10:00")

    def test_unavailable_trainer_checked_before_times(self, db, service, user, unavailable_trainer):
        with pytest.raises(InvalidStateError):
            book(service, db, user, unavailable_trainer, "11:00", "10:00")

    def test_trainer_row_is_locked_for_the_booking(self, db, service, user, trainer):
        with patch.object(
            trainer_repository, "get_for_update", wraps=trainer_repository.get_for_update
        ) as locked_get:
            book(service, db, user, trainer, "09:00", "10:00")

        locked_get.assert_called_once_with(db, trainer.id)


def test_get_for_update_requests_row_lock():
    db = Mock(spec=Session)
    locked = db.query.return_value.filter.return_value.with_for_update.return_value
    locked.first.return_value = "trainer"

    assert trainer_repository.get_for_update(db, 5) == "trainer"
    db.query.return_value.filter.return_value.with_for_update.assert_called_once_with()


class TestUpdatePersonalTraining:

    @pytest.fixture
    def session(self, db, service, user, trainer):
        return book(service, db, user, trainer, "09:00", "10:00", notes="Primera sesión")

    def test_status_only_keeps_notes(self, db, user, session):
        service = PersonalTrainingService(clock=lambda: datetime(2025, 6, 10, 11, 0))

        updated = service.update_personal_training(
            db, session_id=session.id, user_id=user.id,
            update_in=PersonalTrainingUpdate(user_id=user.id, status=SessionStatus.COMPLETED)
        )

        assert updated.status == SessionStatus.COMPLETED
        assert updated.notes == "Primera sesión"
        assert updated.updated_at == datetime(2025, 6, 10, 11, 0)

    def test_explicit_null_clears_notes(self, db, service, user, session):
        updated = service.update_personal_training(
            db, session_id=session.id, user_id=user.id,
            update_in=PersonalTrainingUpdate(user_id=user.id, notes=None)
        )

        assert updated.notes is None
        assert updated.status == SessionStatus.SCHEDULED

    def test_empty_update_only_touches_updated_at(self, db, user, session):
        service = PersonalTrainingService(clock=lambda: datetime(2025, 6, 12, 7, 0))

        updated = service.update_personal_training(
            db, session_id=session.id, user_id=user.id,
            update_in=PersonalTrainingUpdate(user_id=user.id)
        )

        assert updated.notes == "Primera sesión"
        assert updated.updated_at == datetime(2025, 6, 12, 7, 0)

    def test_any_transition_allowed(self, db, service, user, session):
        for status in (SessionStatus.CANCELLED, SessionStatus.SCHEDULED, SessionStatus.COMPLETED):
            updated = service.update_personal_training(
                db, session_id=session.id, user_id=user.id,
                update_in=PersonalTrainingUpdate(user_id=user.id, status=status)
            )
            assert updated.status == status

    def test_other_users_session_is_not_found(self, db, service, other_user, session):
        with pytest.raises(NotFoundError):
            service.update_personal_training(
                db, session_id=session.id, user_id=other_user.id,
                update_in=PersonalTrainingUpdate(user_id=other_user.id, notes="hack")
            )


def test_user_sessions_ordered_by_date_then_time(db, service, user, trainer):
    late = book(service, db, user, trainer, "18:00", "19:00")
    early = book(service, db, user, trainer, "08:00", "09:00")
    previous_day = book(service, db, user, trainer, "20:00", "21:00", day=datetime(2025, 6, 9))

    sessions = service.get_user_personal_training_sessions(db, user_id=user.id)
    assert [s.id for s in sessions] == [previous_day.id, early.id, late.id]
