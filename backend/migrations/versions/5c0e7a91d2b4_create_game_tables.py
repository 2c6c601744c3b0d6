"""create country, game_image, player, score and gallery_item tables

Revision ID: 5c0e7a91d2b4
Revises:
Create Date: 2026-02-14 00:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c0e7a91d2b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'country',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('code', sa.String(length=2), nullable=False),
        sa.Column('flag', sa.String(length=16), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('code'),
    )
    with op.batch_alter_table('country') as batch_op:
        batch_op.create_index(batch_op.f('ix_country_name'), ['name'], unique=True)

    op.create_table(
        'game_image',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('url', sa.String(length=512), nullable=False),
        sa.Column('is_ai', sa.Boolean(), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('description', sa.String(length=256), nullable=True),
        sa.Column('source', sa.String(length=256), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('url'),
    )
    with op.batch_alter_table('game_image') as batch_op:
        batch_op.create_index(batch_op.f('ix_game_image_is_ai'), ['is_ai'], unique=False)

    op.create_table(
        'player',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'score',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('player_id', sa.Integer(), nullable=False),
        sa.Column('total_score', sa.Integer(), nullable=False),
        sa.Column('correct_count', sa.Integer(), nullable=False),
        sa.Column('total_images', sa.Integer(), nullable=False),
        sa.Column('accuracy', sa.Float(), nullable=False),
        sa.Column('avg_time', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['player_id'], ['player.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('score') as batch_op:
        batch_op.create_index(batch_op.f('ix_score_total_score'), ['total_score'], unique=False)

    op.create_table(
        'gallery_item',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('url', sa.String(length=512), nullable=False),
        sa.Column('username', sa.String(length=64), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('gallery_item') as batch_op:
        batch_op.create_index(batch_op.f('ix_gallery_item_created_at'), ['created_at'], unique=False)


def downgrade():
    with op.batch_alter_table('gallery_item') as batch_op:
        batch_op.drop_index(batch_op.f('ix_gallery_item_created_at'))
    op.drop_table('gallery_item')
    with op.batch_alter_table('score') as batch_op:
        batch_op.drop_index(batch_op.f('ix_score_total_score'))
    op.drop_table('score')
    op.drop_table('player')
    with op.batch_alter_table('game_image') as batch_op:
        batch_op.drop_index(batch_op.f('ix_game_image_is_ai'))
    op.drop_table('game_image')
    with op.batch_alter_table('country') as batch_op:
        batch_op.drop_index(batch_op.f('ix_country_name'))
    op.drop_table('country')
