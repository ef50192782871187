"""create user, income, expense and automation tables

Revision ID: 5d1c9a7e2b40
Revises:
Create Date: 2025-09-14 18:02:11.408215

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '5d1c9a7e2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

INCOME_CATEGORIES = ('Salary', 'Freelance', 'Business', 'Investment', 'Gift', 'Other')
EXPENSE_CATEGORIES = ('Food', 'Transport', 'Shopping', 'Bills', 'Healthcare', 'Entertainment', 'Education', 'Other')
FREQUENCIES = ('Daily', 'Weekly', 'Monthly', 'Yearly')


def _ledger_columns(category_enum):
    return [
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('category', category_enum, nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def _existing_expense_category():
    # en Postgres el tipo ya lo creó la tabla expense
    if op.get_bind().dialect.name == 'postgresql':
        return postgresql.ENUM(*EXPENSE_CATEGORIES, name='expensecategory', create_type=False)
    return sa.Enum(*EXPENSE_CATEGORIES, name='expensecategory')


def upgrade() -> None:
    """Upgrade schema: create the finance tables."""
    op.create_table(
        'user',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=True),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)
    op.create_index('ix_user_first_name', 'user', ['first_name'])

    op.create_table('income', *_ledger_columns(sa.Enum(*INCOME_CATEGORIES, name='incomecategory')))
    op.create_index('ix_income_user_id', 'income', ['user_id'])
    op.create_index('ix_income_user_date', 'income', ['user_id', 'date'])

    op.create_table('expense', *_ledger_columns(sa.Enum(*EXPENSE_CATEGORIES, name='expensecategory')))
    op.create_index('ix_expense_user_id', 'expense', ['user_id'])
    op.create_index('ix_expense_user_date', 'expense', ['user_id', 'date'])

    op.create_table(
        'automation',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('frequency', sa.Enum(*FREQUENCIES, name='frequency'), nullable=False),
        sa.Column('category', _existing_expense_category(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('last_processed_date', sa.DateTime(), nullable=True),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=300), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_automation_user_id', 'automation', ['user_id'])
    op.create_index(
        'ix_automation_user_active_frequency', 'automation', ['user_id', 'is_active', 'frequency']
    )


def downgrade() -> None:
    """Downgrade schema: drop the finance tables."""
    op.drop_table('automation')
    op.drop_table('expense')
    op.drop_table('income')
    op.drop_index('ix_user_first_name', table_name='user')
    op.drop_index('ix_user_email', table_name='user')
    op.drop_table('user')
    sa.Enum(name='frequency').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='expensecategory').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='incomecategory').drop(op.get_bind(), checkfirst=True)
