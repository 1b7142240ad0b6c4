"""create player, game and playergame tables

Revision ID: 5a1c9e3d7b20
Revises:
Create Date: 2025-10-01 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5a1c9e3d7b20'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases created by hand already carry these tables
    existing_tables = set(insp.get_table_names())

    if 'player' not in existing_tables:
        op.create_table(
            'player',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(length=50), nullable=False),
            sa.Column('email', sa.String(length=50), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
    if 'game' not in existing_tables:
        op.create_table(
            'game',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('time', sa.DateTime(), server_default=sa.text('now()'), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )
    if 'playergame' not in existing_tables:
        op.create_table(
            'playergame',
            sa.Column('gameid', sa.Integer(), nullable=False),
            sa.Column('playerid', sa.Integer(), nullable=False),
            sa.Column('score', sa.Integer(), nullable=True),
            sa.ForeignKeyConstraint(['gameid'], ['game.id']),
            sa.ForeignKeyConstraint(['playerid'], ['player.id']),
            sa.PrimaryKeyConstraint('gameid', 'playerid'),
        )


def downgrade():
    op.drop_table('playergame')
    op.drop_table('game')
    op.drop_table('player')
