"""Initial schema: users, plant catalog, garden management, reference tables.

Revision ID: 5e2a9c7d41b0
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5e2a9c7d41b0"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("address", sa.String(length=500), nullable=True),
        sa.Column("country", sa.String(length=100), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("avatar", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    # Email uniqueness lives in the schema, not only in the registration check.
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "rekomendasi_tanaman",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("latin", sa.String(length=255), nullable=True),
        sa.Column("family", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=255), nullable=True),
        sa.Column("climate", sa.String(length=255), nullable=True),
        sa.Column("ideal_light", sa.String(length=255), nullable=True),
        sa.Column("tolerated_light", sa.String(length=255), nullable=True),
        sa.Column("watering", sa.String(length=255), nullable=True),
        sa.Column("insects", sa.String(length=500), nullable=True),
        sa.Column("plant_use", sa.String(length=500), nullable=True),
        sa.Column("temp_max_celsius", sa.Float(), nullable=True),
        sa.Column("temp_min_celsius", sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_rekomendasi_tanaman_family", "rekomendasi_tanaman", ["family"])

    op.create_table(
        "manajemen_kebun",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("plant_name", sa.String(length=255), nullable=True),
        sa.Column("growth", sa.String(length=100), nullable=True),
        sa.Column("soil", sa.String(length=255), nullable=True),
        sa.Column("sunlight", sa.String(length=255), nullable=True),
        sa.Column("watering", sa.String(length=255), nullable=True),
        sa.Column("fertilization_type", sa.String(length=255), nullable=True),
        sa.Column("family", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_manajemen_kebun_user_id", "manajemen_kebun", ["user_id"])
    op.create_index("ix_manajemen_kebun_family", "manajemen_kebun", ["family"])

    op.create_table(
        "cleaned_plants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("latin", sa.String(length=255), nullable=True),
        sa.Column("family", sa.String(length=255), nullable=True),
        sa.Column("common_name", sa.String(length=255), nullable=True),
        sa.Column("category", sa.String(length=255), nullable=True),
        sa.Column("climate", sa.String(length=255), nullable=True),
        sa.Column("ideal_light", sa.String(length=255), nullable=True),
        sa.Column("watering", sa.String(length=255), nullable=True),
        sa.Column("temp_max_celsius", sa.Float(), nullable=True),
        sa.Column("temp_min_celsius", sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cleaned_plants_family", "cleaned_plants", ["family"])

    op.create_table(
        "plantsandfamily",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("plant_name", sa.String(length=255), nullable=False),
        sa.Column("family", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_plantsandfamily_family", "plantsandfamily", ["family"])


def downgrade() -> None:
    op.drop_index("ix_plantsandfamily_family", table_name="plantsandfamily")
    op.drop_table("plantsandfamily")
    op.drop_index("ix_cleaned_plants_family", table_name="cleaned_plants")
    op.drop_table("cleaned_plants")
    op.drop_index("ix_manajemen_kebun_family", table_name="manajemen_kebun")
    op.drop_index("ix_manajemen_kebun_user_id", table_name="manajemen_kebun")
    op.drop_table("manajemen_kebun")
    op.drop_index("ix_rekomendasi_tanaman_family", table_name="rekomendasi_tanaman")
    op.drop_table("rekomendasi_tanaman")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
