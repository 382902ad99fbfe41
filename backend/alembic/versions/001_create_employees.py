"""Create employees table.

Revision ID: 001_create_employees
Revises:
Create Date: 2026-10-19

Email is indexed but not unique; duplicate detection happens on create.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_create_employees'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
    )
    op.create_index('ix_employees_email', 'employees', ['email'])
    op.create_index('ix_employees_first_name', 'employees', ['first_name'])


def downgrade() -> None:
    op.drop_index('ix_employees_first_name', table_name='employees')
    op.drop_index('ix_employees_email', table_name='employees')
    op.drop_table('employees')
