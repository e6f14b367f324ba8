from alembic import op
import sqlalchemy as sa


revision = "4f1d2c9a7b10"
down_revision = None
branch_labels = None
depends_on = None


def _table_exists(bind, table_name: str) -> bool:
    insp = sa.inspect(bind)
    return table_name in insp.get_table_names()


def upgrade() -> None:
    bind = op.get_bind()

    if not _table_exists(bind, "club_categories"):
        op.create_table(
            "club_categories",
            sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False, unique=True),
            sa.Column("description", sa.String(length=255), nullable=False, server_default=""),
            sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
            sa.Column("updated_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
        )

    if not _table_exists(bind, "members"):
        op.create_table(
            "members",
            sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
            sa.Column("name", sa.String(length=150), nullable=False),
            sa.Column("phone", sa.String(length=30), nullable=False, unique=True),
            sa.Column("club_category_id", sa.Uuid(as_uuid=True), sa.ForeignKey("club_categories.id"), nullable=True),
            sa.Column("valid_until", sa.TIMESTAMP(), nullable=False),
            sa.Column("points", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
            sa.Column("updated_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
            sa.CheckConstraint("points >= 0", name="ck_members_points_non_negative"),
        )
        op.create_index("ix_members_name", "members", ["name"])
        op.create_index("ix_members_club_category_id", "members", ["club_category_id"])
        op.create_index("ix_members_valid_until", "members", ["valid_until"])

    if not _table_exists(bind, "products"):
        op.create_table(
            "products",
            sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
            sa.Column("name", sa.String(length=150), nullable=False, unique=True),
            sa.Column("price", sa.Float(), nullable=False, server_default="0"),
            sa.Column("point_value", sa.Integer(), nullable=False, server_default="1"),
            sa.Column("created_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
            sa.Column("updated_at", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
            sa.CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
            sa.CheckConstraint("point_value >= 0", name="ck_products_point_value_non_negative"),
        )

    if not _table_exists(bind, "transactions"):
        op.create_table(
            "transactions",
            sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True, nullable=False),
            sa.Column("member_id", sa.Uuid(as_uuid=True), sa.ForeignKey("members.id"), nullable=False),
            sa.Column("product_id", sa.Uuid(as_uuid=True), sa.ForeignKey("products.id"), nullable=False),
            sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
            sa.Column("total_price", sa.Float(), nullable=False, server_default="0"),
            sa.Column("points_added", sa.Integer(), nullable=False, server_default="0"),
            sa.Column("created_at", sa.TIMESTAMP(), nullable=False),
            sa.CheckConstraint("quantity >= 1", name="ck_transactions_quantity_positive"),
        )
        op.create_index("ix_transactions_member_id", "transactions", ["member_id"])
        op.create_index("ix_transactions_product_id", "transactions", ["product_id"])
        op.create_index("ix_transactions_created_at", "transactions", ["created_at"])


def downgrade() -> None:
    bind = op.get_bind()

    for table_name in ("transactions", "products", "members", "club_categories"):
        if _table_exists(bind, table_name):
            op.drop_table(table_name)
