"""create scores table

Revision ID: 3c1f0a9b2d47
Revises:
Create Date: 2024-04-01 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a9b2d47'
down_revision = None
branch_labels = None
depends_on = None


def _name_is_unique(insp):
    if insp.get_pk_constraint('scores').get('constrained_columns') == ['name']:
        return True
    if any(u['column_names'] == ['name'] for u in insp.get_unique_constraints('scores')):
        return True
    return any(ix['unique'] and ix['column_names'] == ['name'] for ix in insp.get_indexes('scores'))


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases created before migrations already carry the table, possibly
    # without any key on name; give them a unique index instead
    if 'scores' in set(insp.get_table_names()):
        if not _name_is_unique(insp):
            op.create_index('uq_scores_name', 'scores', ['name'], unique=True)
        return

    op.create_table(
        'scores',
        sa.Column('name', sa.String(length=10), nullable=False),
        sa.Column('score_value', sa.BigInteger(), nullable=False, server_default=sa.text('0')),
        sa.PrimaryKeyConstraint('name'),
    )


def downgrade():
    op.drop_table('scores')
