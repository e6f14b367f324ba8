import logging

from sqlalchemy.orm import Session

from coffee_loyalty.errors import BusinessRuleViolation, NotFoundError, ValidationError
from coffee_loyalty.models.transaction import Transaction
from coffee_loyalty.repositories.member_repository import MemberRepository
from coffee_loyalty.repositories.product_repository import ProductRepository
from coffee_loyalty.repositories.transaction_repository import TransactionRepository
from coffee_loyalty.utils import as_whole_number, parse_uuid, utcnow


logger = logging.getLogger(__name__)

MIN_REDEEM_POINTS = 10


def _is_expired(member, now) -> bool:
    return member.valid_until < now


# ============================================================
# RECORD PURCHASE
# ============================================================

def record_purchase(db: Session, *, member_id, product_id, quantity=1) -> Transaction:
    """
    Persist a purchase and credit its points to the member.

    Checks run in a fixed order and the first failure wins: member id format, member
    existence, membership validity, product id format, product existence, quantity.

    The transaction row and the member balance are two separate commits. If the balance
    update fails the transaction row stays; nothing compensates for it.
    """
    members = MemberRepository(db)
    products = ProductRepository(db)
    transactions = TransactionRepository(db)

    member_uuid = parse_uuid(member_id)
    if member_uuid is None:
        raise ValidationError("Valid memberId is required.")

    member = members.get(member_uuid)
    if not member:
        raise NotFoundError("Member not found.")

    now = utcnow()
    if _is_expired(member, now):
        raise BusinessRuleViolation("Membership expired.")

    product_uuid = parse_uuid(product_id)
    if product_uuid is None:
        raise ValidationError("Valid productId is required.")

    product = products.get(product_uuid)
    if not product:
        raise NotFoundError("Product not found.")

    qty = as_whole_number(quantity)
    if qty is None or qty < 1:
        raise ValidationError("Quantity must be a positive integer.")

    transaction = Transaction(
        member_id=member.id,
        product_id=product.id,
        quantity=qty,
        total_price=product.price * qty,
        points_added=product.point_value * qty,
        created_at=now,
    )
    transactions.save(transaction)

    # 🔹 lock the member row while its balance moves
    member = members.get(member.id, for_update=True)
    current = member.points if isinstance(member.points, int) else 0
    member.points = current + transaction.points_added
    members.save(member)

    logger.info(
        "purchase recorded",
        extra={
            "transaction_id": str(transaction.id),
            "member_id": str(member.id),
            "points_added": transaction.points_added,
        },
    )

    return transaction


# ============================================================
# REDEEM POINTS
# ============================================================

def redeem_points(db: Session, *, member_id, points):
    """
    Spend points from a member balance. Redemptions are not recorded as transactions.
    """
    amount = as_whole_number(points)
    if amount is None or amount <= 0:
        raise ValidationError("Points must be a positive number.")

    members = MemberRepository(db)
    member = members.get(member_id, for_update=True)
    if not member:
        raise NotFoundError("Member not found.")

    if _is_expired(member, utcnow()):
        raise BusinessRuleViolation("Membership expired.")

    balance = member.points or 0
    if balance < amount:
        raise BusinessRuleViolation("Insufficient points.")

    if amount < MIN_REDEEM_POINTS:
        raise BusinessRuleViolation(f"Minimum redeem points is {MIN_REDEEM_POINTS}.")

    member.points = balance - amount
    members.save(member)

    logger.info(
        "points redeemed",
        extra={"member_id": str(member.id), "points": amount, "balance": member.points},
    )

    return member
