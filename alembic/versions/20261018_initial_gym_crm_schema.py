"""initial gym crm schema

Revision ID: 20261018_initial
Revises:
Create Date: 2026-10-18 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261018_initial'
down_revision = None
branch_labels = None
depends_on = None

TRAINING_TYPES = ('FITNESS', 'YOGA', 'ZUMBA', 'STRETCHING', 'RESISTANCE')


def upgrade():
    op.create_table(
        'trainees',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trainees_id'), 'trainees', ['id'], unique=False)
    # Уникальность логина обеспечивается базой
    op.create_index(op.f('ix_trainees_username'), 'trainees', ['username'], unique=True)

    op.create_table(
        'trainers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('specialization', sa.Enum(*TRAINING_TYPES, name='trainingtype'), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trainers_id'), 'trainers', ['id'], unique=False)
    op.create_index(op.f('ix_trainers_username'), 'trainers', ['username'], unique=True)

    op.create_table(
        'trainings',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('trainee_id', sa.Integer(), nullable=True),
        sa.Column('trainer_id', sa.Integer(), nullable=True),
        sa.Column('training_name', sa.String(), nullable=False),
        sa.Column('training_type', sa.Enum(*TRAINING_TYPES, name='trainingtype', create_type=False), nullable=False),
        sa.Column('training_date', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['trainee_id'], ['trainees.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['trainer_id'], ['trainers.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_trainings_id'), 'trainings', ['id'], unique=False)
    op.create_index(op.f('ix_trainings_trainee_id'), 'trainings', ['trainee_id'], unique=False)
    op.create_index(op.f('ix_trainings_trainer_id'), 'trainings', ['trainer_id'], unique=False)
    op.create_index(op.f('ix_trainings_training_date'), 'trainings', ['training_date'], unique=False)


def downgrade():
    op.drop_table('trainings')
    op.drop_table('trainers')
    op.drop_table('trainees')
    sa.Enum(name='trainingtype').drop(op.get_bind(), checkfirst=True)
