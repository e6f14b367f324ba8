"""Tests for the points ledger."""

import uuid
from datetime import timedelta

import pytest

from coffee_loyalty.errors import BusinessRuleViolation, NotFoundError, StorageError, ValidationError
from coffee_loyalty.models.member import Member
from coffee_loyalty.models.transaction import Transaction
from coffee_loyalty.services import ledger_service
from coffee_loyalty.services.ledger_service import MIN_REDEEM_POINTS, record_purchase, redeem_points
from coffee_loyalty.utils import utcnow


class TestRecordPurchase:
    def test_totals_and_points(self, db, member, product):
        """price 10, pointValue 2, quantity 3 gives 30 and 6."""
        tx = record_purchase(db, member_id=str(member.id), product_id=str(product.id), quantity=3)

        assert tx.id is not None
        assert tx.total_price == 30
        assert tx.points_added == 6
        assert tx.quantity == 3
        assert tx.created_at is not None

        db.refresh(member)
        assert member.points == 26

    def test_default_quantity_is_one(self, db, member, product):
        tx = record_purchase(db, member_id=str(member.id), product_id=str(product.id))

        assert tx.quantity == 1
        assert tx.total_price == 10
        assert tx.points_added == 2

    def test_transaction_is_persisted(self, db, member, product):
        tx = record_purchase(db, member_id=member.id, product_id=product.id, quantity=2)

        stored = db.query(Transaction).filter(Transaction.id == tx.id).one()
        assert stored.member_id == member.id
        assert stored.product_id == product.id

    def test_points_accumulate_over_purchases(self, db, member, product):
        for qty in (1, 2, 3):
            record_purchase(db, member_id=member.id, product_id=product.id, quantity=qty)

        db.refresh(member)
        assert member.points == 20 + 2 * (1 + 2 + 3)

    def test_invalid_member_id(self, db, product):
        with pytest.raises(ValidationError) as exc:
            record_purchase(db, member_id="not-an-id", product_id=product.id, quantity=1)
        assert exc.value.message == "Valid memberId is required."
        assert exc.value.status_code == 400

    def test_missing_member_id(self, db, product):
        with pytest.raises(ValidationError):
            record_purchase(db, member_id=None, product_id=product.id)

    def test_unknown_member(self, db, product):
        with pytest.raises(NotFoundError) as exc:
            record_purchase(db, member_id=str(uuid.uuid4()), product_id=product.id)
        assert exc.value.message == "Member not found."
        assert exc.value.status_code == 404

    def test_expired_membership(self, db, expired_member, product):
        with pytest.raises(BusinessRuleViolation) as exc:
            record_purchase(db, member_id=expired_member.id, product_id=product.id, quantity=1)
        assert exc.value.message == "Membership expired."

    def test_expired_wins_over_bad_product_and_quantity(self, db, expired_member):
        with pytest.raises(BusinessRuleViolation) as exc:
            record_purchase(db, member_id=expired_member.id, product_id="bogus", quantity=0)
        assert exc.value.message == "Membership expired."

    def test_invalid_product_id(self, db, member):
        with pytest.raises(ValidationError) as exc:
            record_purchase(db, member_id=member.id, product_id="123", quantity=1)
        assert exc.value.message == "Valid productId is required."

    def test_unknown_product(self, db, member):
        with pytest.raises(NotFoundError) as exc:
            record_purchase(db, member_id=member.id, product_id=str(uuid.uuid4()), quantity=1)
        assert exc.value.message == "Product not found."

    @pytest.mark.parametrize("quantity", [0, -1, 1.5, "2", True, None])
    def test_invalid_quantity(self, db, member, product, quantity):
        with pytest.raises(ValidationError) as exc:
            record_purchase(db, member_id=member.id, product_id=product.id, quantity=quantity)
        assert exc.value.message == "Quantity must be a positive integer."

    def test_failure_leaves_no_transaction(self, db, member):
        with pytest.raises(NotFoundError):
            record_purchase(db, member_id=member.id, product_id=str(uuid.uuid4()), quantity=1)
        assert db.query(Transaction).count() == 0

        db.refresh(member)
        assert member.points == 20

    def test_member_update_failure_keeps_transaction(self, db, member, product, monkeypatch):
        """The second write is not compensated when it fails."""
        def failing_save(self, entity):
            raise StorageError("Failed to save member.")

        monkeypatch.setattr(ledger_service.MemberRepository, "save", failing_save)
        with pytest.raises(StorageError):
            record_purchase(db, member_id=member.id, product_id=product.id, quantity=1)

        db.rollback()
        assert db.query(Transaction).count() == 1
        db.refresh(member)
        assert member.points == 20


class TestRedeemPoints:
    def test_redeem_success(self, db, member):
        """20 points, redeem 15, 5 left."""
        redeem_points(db, member_id=str(member.id), points=15)

        db.refresh(member)
        assert member.points == 5

    def test_redeem_whole_balance(self, db, member):
        redeem_points(db, member_id=member.id, points=20)

        db.refresh(member)
        assert member.points == 0

    def test_redeem_accepts_integral_float(self, db, member):
        redeem_points(db, member_id=member.id, points=10.0)

        db.refresh(member)
        assert member.points == 10

    @pytest.mark.parametrize("points", [0, -5, "15", None, 12.5, True])
    def test_points_must_be_positive_number(self, db, member, points):
        with pytest.raises(ValidationError) as exc:
            redeem_points(db, member_id=member.id, points=points)
        assert exc.value.message == "Points must be a positive number."

        db.refresh(member)
        assert member.points == 20

    def test_unknown_member(self, db):
        with pytest.raises(NotFoundError) as exc:
            redeem_points(db, member_id=str(uuid.uuid4()), points=10)
        assert exc.value.message == "Member not found."

    def test_malformed_member_id_is_not_found(self, db):
        with pytest.raises(NotFoundError):
            redeem_points(db, member_id="xyz", points=10)

    def test_expired_membership(self, db, expired_member):
        with pytest.raises(BusinessRuleViolation) as exc:
            redeem_points(db, member_id=expired_member.id, points=10)
        assert exc.value.message == "Membership expired."

    def test_insufficient_points(self, db):
        """5 points, redeem 10: insufficient."""
        m = Member(name="Citra", phone="0813", valid_until=utcnow() + timedelta(days=5), points=5)
        db.add(m)
        db.commit()

        with pytest.raises(BusinessRuleViolation) as exc:
            redeem_points(db, member_id=m.id, points=10)
        assert exc.value.message == "Insufficient points."

        db.refresh(m)
        assert m.points == 5

    def test_insufficient_checked_before_minimum(self, db):
        m = Member(name="Dewi", phone="0814", valid_until=utcnow() + timedelta(days=5), points=3)
        db.add(m)
        db.commit()

        with pytest.raises(BusinessRuleViolation) as exc:
            redeem_points(db, member_id=m.id, points=5)
        assert exc.value.message == "Insufficient points."

    def test_below_minimum_with_sufficient_balance(self, db, member):
        with pytest.raises(BusinessRuleViolation) as exc:
            redeem_points(db, member_id=member.id, points=MIN_REDEEM_POINTS - 1)
        assert exc.value.message == "Minimum redeem points is 10."

        db.refresh(member)
        assert member.points == 20

    def test_redeem_does_not_create_transaction(self, db, member):
        redeem_points(db, member_id=member.id, points=10)
        assert db.query(Transaction).count() == 0
