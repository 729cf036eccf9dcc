"""create companies, units, users and assets tables

Revision ID: 3f1c9a7d2b64
Revises:
Create Date: 2026-10-19 12:00:00.000000+00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b64'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=1024), nullable=True),
        sa.Column('cnpj', sa.String(length=14), nullable=False),
        sa.Column('active', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_companies_cnpj', 'companies', ['cnpj'], unique=True)

    op.create_table(
        'units',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('company', sa.Integer(), nullable=False),
    )
    op.create_index('ix_units_company', 'units', ['company'])

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=32), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('company', sa.Integer(), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_company', 'users', ['company'])

    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('healthscore', sa.Float(), nullable=False),
        sa.Column('status', sa.String(length=32), nullable=False),
        sa.Column('serialnumber', sa.String(length=255), nullable=True),
        sa.Column('description', sa.String(length=1024), nullable=True),
        sa.Column('image_type', sa.String(length=255), nullable=True),
        sa.Column('image_buffer', sa.LargeBinary(), nullable=True),
        sa.Column('user', sa.Integer(), nullable=False),
        sa.Column('unit', sa.Integer(), nullable=False),
        sa.Column('company', sa.Integer(), nullable=False),
        sa.UniqueConstraint('serialnumber', name='uq_assets_serialnumber'),
    )
    op.create_index('ix_assets_status', 'assets', ['status'])
    op.create_index('ix_assets_user', 'assets', ['user'])
    op.create_index('ix_assets_unit', 'assets', ['unit'])
    op.create_index('ix_assets_company', 'assets', ['company'])

def downgrade() -> None:
    op.drop_table('assets')
    op.drop_table('users')
    op.drop_table('units')
    op.drop_table('companies')
