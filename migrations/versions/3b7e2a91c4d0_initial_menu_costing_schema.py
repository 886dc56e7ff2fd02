"""Initial menu costing schema

Revision ID: 3b7e2a91c4d0
Revises:
Create Date: 2026-10-19 09:12:41.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2a91c4d0'
down_revision = None
branch_labels = None
depends_on = None


def _ingredient_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('unit_cost', sa.Float(), nullable=True),
        sa.Column('quantity', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(length=20), nullable=True),
        sa.Column('package_cost', sa.Float(), nullable=True),
        sa.Column('package_size', sa.Float(), nullable=True),
        sa.Column('package_unit', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade():
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('color', sa.String(length=7), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_category_display_order', 'category', ['display_order'])

    op.create_table(
        'dish',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('target_margin', sa.Float(), nullable=True),
        sa.Column('selling_price', sa.Float(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['category.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_dish_name', 'dish', ['name'])
    op.create_index('ix_dish_category_id', 'dish', ['category_id'])

    op.create_table(
        'ingredient_template',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('total_yield', sa.Float(), nullable=True),
        sa.Column('yield_unit', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_ingredient_template_name', 'ingredient_template', ['name'])

    op.create_table(
        'dish_ingredient',
        *_ingredient_columns(),
        sa.Column('dish_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['dish_id'], ['dish.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_dish_ingredient_dish_id', 'dish_ingredient', ['dish_id'])

    op.create_table(
        'template_ingredient',
        *_ingredient_columns(),
        sa.Column('template_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['template_id'], ['ingredient_template.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_template_ingredient_template_id', 'template_ingredient', ['template_id'])

    op.create_table(
        'menu',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'menu_dish',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('menu_id', sa.Integer(), nullable=False),
        sa.Column('dish_id', sa.Integer(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['menu_id'], ['menu.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['dish_id'], ['dish.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('menu_id', 'dish_id', name='uq_menu_dish_menu_dish'),
    )
    op.create_index('ix_menu_dish_menu_id', 'menu_dish', ['menu_id'])
    op.create_index('ix_menu_dish_dish_id', 'menu_dish', ['dish_id'])


def downgrade():
    op.drop_table('menu_dish')
    op.drop_table('menu')
    op.drop_table('template_ingredient')
    op.drop_table('dish_ingredient')
    op.drop_table('ingredient_template')
    op.drop_table('dish')
    op.drop_table('category')
