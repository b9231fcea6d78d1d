"""Create products and product_variants tables.

Revision ID: 002
Revises: 001
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create products and product_variants tables."""
    # Products table
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(32), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('category_id', sa.Integer(),
                  sa.ForeignKey('categories.id'), nullable=True, index=True),
    )

    op.create_unique_constraint(
        'uq_products_code',
        'products',
        ['code'],
    )

    # Product variants table; NULL price means "sold at product price"
    op.create_table(
        'product_variants',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('product_id', sa.Integer(),
                  sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('sku', sa.String(64), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
    )

    op.create_unique_constraint(
        'uq_product_variants_sku',
        'product_variants',
        ['sku'],
    )


def downgrade() -> None:
    """Drop products and product_variants tables."""
    op.drop_table('product_variants')
    op.drop_table('products')
