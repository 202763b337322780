"""create_hero_sliders_and_languages

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

Creates the `languages` table (the editable language tracks) and the
`hero_sliders` table. Localized slider fields are JSON so that rows holding
plain strings and rows holding per-language objects can coexist.
"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: str | None = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "languages",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("code", sa.String(10), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("native_name", sa.String(100), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("is_default", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("direction", sa.String(3), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_languages_id", "languages", ["id"])
    op.create_index("ix_languages_code", "languages", ["code"], unique=True)

    op.create_table(
        "hero_sliders",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.JSON, nullable=False),
        sa.Column("subtitle", sa.JSON, nullable=True),
        sa.Column("description", sa.JSON, nullable=False),
        sa.Column("badge", sa.JSON, nullable=True),
        sa.Column("primary_button", sa.JSON, nullable=False),
        sa.Column("secondary_button", sa.JSON, nullable=True),
        sa.Column("statistics", sa.JSON, nullable=True),
        sa.Column("background_image", sa.String, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("order", sa.Integer, nullable=False, server_default="0"),
        sa.Column("version", sa.Integer, nullable=False, server_default="1"),
        sa.Column("created_by_id", sa.Integer, nullable=True),
        sa.Column("updated_by_id", sa.Integer, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )

    # Performance indexes
    op.create_index("ix_hero_sliders_id", "hero_sliders", ["id"])
    op.create_index("idx_hero_slider_order", "hero_sliders", ["order"])
    op.create_index("idx_hero_slider_active_order", "hero_sliders", ["is_active", "order"])


def downgrade() -> None:
    op.drop_index("idx_hero_slider_active_order", table_name="hero_sliders")
    op.drop_index("idx_hero_slider_order", table_name="hero_sliders")
    op.drop_index("ix_hero_sliders_id", table_name="hero_sliders")
    op.drop_table("hero_sliders")

    op.drop_index("ix_languages_code", table_name="languages")
    op.drop_index("ix_languages_id", table_name="languages")
    op.drop_table("languages")
