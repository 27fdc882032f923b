"""create_tasting_tables

Revision ID: 3e8d51c0b7a2
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3e8d51c0b7a2"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "beers",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("beer_id", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("alcohol_percentage", sa.Float(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_beers_beer_id"), "beers", ["beer_id"], unique=True)
    op.create_index(op.f("ix_beers_created_at"), "beers", ["created_at"], unique=False)

    # No FK to beers: cascade on beer delete is done by the beer store
    op.create_table(
        "ratings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("rating_id", sa.String(length=100), nullable=False),
        sa.Column("beer_id", sa.String(length=100), nullable=False),
        sa.Column("value", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("value >= 1 AND value <= 5", name="ck_ratings_value_range"),
    )
    op.create_index(op.f("ix_ratings_rating_id"), "ratings", ["rating_id"], unique=True)
    op.create_index(op.f("ix_ratings_beer_id"), "ratings", ["beer_id"], unique=False)

    op.create_table(
        "tasting_settings",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("show_beer_names", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("tasting_settings")
    op.drop_index(op.f("ix_ratings_beer_id"), table_name="ratings")
    op.drop_index(op.f("ix_ratings_rating_id"), table_name="ratings")
    op.drop_table("ratings")
    op.drop_index(op.f("ix_beers_created_at"), table_name="beers")
    op.drop_index(op.f("ix_beers_beer_id"), table_name="beers")
    op.drop_table("beers")
