"""add time_score to scores

Revision ID: 7e2d4b8a1c90
Revises: 3c1f0a9b2d47
Create Date: 2024-04-03 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7e2d4b8a1c90'
down_revision = '3c1f0a9b2d47'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    cols = {c['name'] for c in insp.get_columns('scores')}
    if 'time_score' not in cols:
        op.add_column(
            'scores',
            sa.Column('time_score', sa.BigInteger(), nullable=False, server_default=sa.text('0')),
        )
    # Rows written by older clients may still carry NULL
    op.execute("UPDATE scores SET time_score = 0 WHERE time_score IS NULL")


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    cols = {c['name'] for c in insp.get_columns('scores')}
    if 'time_score' in cols:
        with op.batch_alter_table('scores') as batch_op:
            batch_op.drop_column('time_score')
